"""Builders for hand-made markdown-it token streams.

The parser trims whitespace around paragraphs, so whitespace-only paragraphs
can only be produced by building the tokens directly.
"""

from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode


def text_token(value: str) -> Token:
    return Token("text", "", 0, content=value)


def softbreak_token() -> Token:
    return Token("softbreak", "br", 0)


def image_token(src: str = "a.png") -> Token:
    return Token("image", "img", 0, attrs={"src": src, "alt": ""}, children=[], content="")


def paragraph_tokens(*inline_children: Token) -> list[Token]:
    """Token stream of a single paragraph holding the given inline tokens."""
    return [
        Token("paragraph_open", "p", 1, block=True),
        Token("inline", "", 0, children=list(inline_children), block=True),
        Token("paragraph_close", "p", -1, block=True),
    ]


def paragraph_node(*inline_children: Token) -> SyntaxTreeNode:
    return SyntaxTreeNode(paragraph_tokens(*inline_children)).children[0]
