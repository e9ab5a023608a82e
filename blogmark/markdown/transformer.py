"""Transform markdown AST to a presentation tree.

Walks the markdown-it-py SyntaxTreeNode and produces Element/Text nodes ready
for HTML serialization. Paragraph and strong nodes get the site's own
handling, everything else goes through the built-in handlers.
"""

from loguru import logger
from markdown_it.tree import SyntaxTreeNode

from blogmark.config import MarkdownSettings, get_settings
from blogmark.markdown.defaults import default_handler
from blogmark.markdown.footnotes import build_footnote_section
from blogmark.markdown.handlers import paragraph_to_element, strong_to_emphasis
from blogmark.markdown.models import HandlerResult, Root
from blogmark.markdown.parser import parse_markdown
from blogmark.markdown.render import render_html
from blogmark.markdown.sections import wrap_sections
from blogmark.markdown.state import ConversionState


class DocumentTransformer:
    """Transforms markdown AST to a presentation Root."""

    def __init__(self, settings: MarkdownSettings | None = None, entry_id: int | None = None):
        self.settings = settings or get_settings()
        # Scopes footnote ids to one blog entry when set
        self.entry_id = entry_id

    def transform(self, ast: SyntaxTreeNode) -> Root:
        """Transform AST root to a presentation Root."""
        state = ConversionState(self._convert_node, settings=self.settings, entry_id=self.entry_id)
        if self.settings.heading_sections:
            children = wrap_sections(state, ast.children)
        else:
            children = state.all(ast)

        footnotes = build_footnote_section(state)
        if footnotes is not None:
            children.append(footnotes)

        logger.debug(f"Converted document: {len(children)} top-level nodes, {len(state.footnote_order)} footnotes")
        return Root(children=children)

    def _convert_node(self, state: ConversionState, node: SyntaxTreeNode) -> HandlerResult:
        match node.type:
            case "paragraph":
                return paragraph_to_element(state, node)
            case "strong":
                return strong_to_emphasis(state, node)
            case _:
                return default_handler(state, node)


def transform_to_presentation(
    ast: SyntaxTreeNode,
    *,
    settings: MarkdownSettings | None = None,
    entry_id: int | None = None,
) -> Root:
    """Transform markdown AST to a presentation tree.

    Args:
        ast: Root SyntaxTreeNode from parse_markdown()
        settings: Conversion settings, environment defaults when omitted
        entry_id: Blog entry the document belongs to, scopes footnote ids

    Returns:
        Root of the presentation tree
    """
    transformer = DocumentTransformer(settings=settings, entry_id=entry_id)
    return transformer.transform(ast)


def markdown_to_html(
    text: str,
    *,
    settings: MarkdownSettings | None = None,
    entry_id: int | None = None,
) -> str:
    """Parse, transform and serialize a markdown document."""
    root = transform_to_presentation(parse_markdown(text), settings=settings, entry_id=entry_id)
    return render_html(root)
