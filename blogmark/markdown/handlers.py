"""Site-specific node handlers, overriding the built-in conversion."""

from loguru import logger
from markdown_it.tree import SyntaxTreeNode

from blogmark.markdown.defaults import paragraph
from blogmark.markdown.mdast import is_empty_paragraph
from blogmark.markdown.models import Element, HandlerResult
from blogmark.markdown.state import ConversionState


def paragraph_to_element(state: ConversionState, node: SyntaxTreeNode) -> HandlerResult:
    """Drop paragraphs left with only whitespace, convert the rest as usual."""
    if is_empty_paragraph(node):
        logger.debug(f"Eliding empty paragraph at lines {node.map}")
        return None
    return paragraph(state, node)


def strong_to_emphasis(state: ConversionState, node: SyntaxTreeNode) -> Element:
    """<strong> → <em>

    ``**text**`` marks emphasis on this site, not strong importance.
    """
    return Element(tag_name="em", children=state.all(node))
