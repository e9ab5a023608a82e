"""Blog entry markdown → markdown-it syntax tree.

Entries are CommonMark with GFM tables and ~~strikethrough~~, plus footnotes
in both forms the blog uses: ``[^label]`` with a separate definition, and
inline ``^[text]`` notes.
"""

from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.footnote import footnote_plugin


def create_parser() -> MarkdownIt:
    md = MarkdownIt("commonmark").enable(["table", "strikethrough"])
    # Definitions end up in one footnote_block at the end of the token stream
    return md.use(footnote_plugin)


@lru_cache(maxsize=1)
def get_parser() -> MarkdownIt:
    """Shared parser; markdown-it instances hold no per-document state."""
    return create_parser()


def parse_markdown(text: str) -> SyntaxTreeNode:
    """Parse an entry's markdown source into its syntax tree root."""
    return SyntaxTreeNode(get_parser().parse(text))
