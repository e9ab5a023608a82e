"""Markdown parsing and transformation to presentation HTML."""

from blogmark.markdown.ids import annotation_id, footnote_id, footnote_reference_id
from blogmark.markdown.mdast import is_empty_paragraph
from blogmark.markdown.models import (
    Element,
    ElementContent,
    Raw,
    Root,
    Text,
)
from blogmark.markdown.parser import parse_markdown
from blogmark.markdown.render import render_html
from blogmark.markdown.state import ConversionState
from blogmark.markdown.transformer import (
    DocumentTransformer,
    markdown_to_html,
    transform_to_presentation,
)

__all__ = [
    # Parser
    "parse_markdown",
    # Transformer
    "ConversionState",
    "DocumentTransformer",
    "transform_to_presentation",
    "markdown_to_html",
    "is_empty_paragraph",
    # Ids
    "footnote_id",
    "footnote_reference_id",
    "annotation_id",
    # Rendering
    "render_html",
    # Models
    "Root",
    "Element",
    "ElementContent",
    "Text",
    "Raw",
]
