"""Queries over markdown-it syntax tree nodes."""

from collections.abc import Iterator

from markdown_it.tree import SyntaxTreeNode

# Leaf types that carry literal text. A soft line break is a newline inside
# running text in the source, so it counts as whitespace.
TEXT_TYPES = frozenset({"text", "text_special"})


def phrasing_children(node: SyntaxTreeNode) -> Iterator[SyntaxTreeNode]:
    """Yield the phrasing content of a block, looking through its ``inline`` wrapper."""
    for child in node.children:
        if child.type == "inline":
            yield from child.children
        else:
            yield child


def _is_blank_text(node: SyntaxTreeNode) -> bool:
    if node.type == "softbreak":
        return True
    return node.type in TEXT_TYPES and not (node.content or "").strip()


def is_empty_paragraph(node: SyntaxTreeNode) -> bool:
    """Check if a paragraph holds nothing but whitespace-only text.

    A paragraph without any children is empty as well.
    """
    return all(_is_blank_text(child) for child in phrasing_children(node))


def to_plain_text(node: SyntaxTreeNode) -> str:
    """Concatenate the text content of a subtree (markup dropped)."""
    if node.type in TEXT_TYPES or node.type == "code_inline":
        return node.content or ""
    if node.type in ("softbreak", "hardbreak"):
        return "\n"
    return "".join(to_plain_text(child) for child in node.children)
