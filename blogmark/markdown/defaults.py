"""Built-in conversion of markdown-it nodes to presentation nodes.

One handler per markdown-it node type. Custom handlers in ``handlers.py`` take
precedence for the types they cover and fall back to these.
"""

from loguru import logger
from markdown_it.tree import SyntaxTreeNode

from blogmark.markdown.footnotes import collect_definitions, footnote_reference
from blogmark.markdown.mdast import to_plain_text
from blogmark.markdown.models import Element, ElementContent, HandlerResult, Raw, Text
from blogmark.markdown.state import ConversionState, Handler

MAX_HEADING_LEVEL = 6


def _element(tag_name: str, state: ConversionState, node: SyntaxTreeNode, **properties) -> Element:
    return Element(tag_name=tag_name, properties=properties, children=state.all(node))


def paragraph(state: ConversionState, node: SyntaxTreeNode) -> HandlerResult:
    # Paragraphs of tight list items are rendered without <p>
    if node.hidden:
        return state.all(node)
    return _element("p", state, node)


def heading(state: ConversionState, node: SyntaxTreeNode) -> Element:
    """Render heading depth d at level ``d + heading_start_level - 1``.

    Levels past h6 become ``<p role="heading" aria-level="N">``.
    """
    depth = int(node.tag[1])  # h1 -> 1, h2 -> 2, etc.
    level = depth + state.settings.heading_start_level - 1
    if level > MAX_HEADING_LEVEL:
        return _element("p", state, node, role="heading", **{"aria-level": level})
    return _element(f"h{level}", state, node)


def inline(state: ConversionState, node: SyntaxTreeNode) -> list[ElementContent]:
    return state.all(node)


def text(state: ConversionState, node: SyntaxTreeNode) -> Text | None:
    # Emphasis delimiters leave empty text tokens behind
    if not node.content:
        return None
    return Text(value=node.content)


def softbreak(state: ConversionState, node: SyntaxTreeNode) -> Text:
    return Text(value="\n")


def hardbreak(state: ConversionState, node: SyntaxTreeNode) -> list[ElementContent]:
    return [Element(tag_name="br"), Text(value="\n")]


def code_inline(state: ConversionState, node: SyntaxTreeNode) -> Element:
    return Element(tag_name="code", children=[Text(value=node.content)])


def code_block(state: ConversionState, node: SyntaxTreeNode) -> Element:
    """Fenced or indented code: ``<pre><code class="language-X">``."""
    code_properties = {}
    info = node.info.strip() if node.type == "fence" else ""
    if info:
        code_properties["class"] = [f"language-{info.split()[0]}"]
    return Element(
        tag_name="pre",
        children=[Element(tag_name="code", properties=code_properties, children=[Text(value=node.content)])],
    )


def link(state: ConversionState, node: SyntaxTreeNode) -> Element:
    properties = {"href": str(node.attrs.get("href", ""))}
    if node.attrs.get("title"):
        properties["title"] = str(node.attrs["title"])
    return _element("a", state, node, **properties)


def image(state: ConversionState, node: SyntaxTreeNode) -> Element:
    properties = {"src": str(node.attrs.get("src", "")), "alt": to_plain_text(node)}
    if node.attrs.get("title"):
        properties["title"] = str(node.attrs["title"])
    return Element(tag_name="img", properties=properties)


def ordered_list(state: ConversionState, node: SyntaxTreeNode) -> Element:
    start = node.attrs.get("start")
    if start is not None and int(start) != 1:
        return _element("ol", state, node, start=int(start))
    return _element("ol", state, node)


def table_cell(state: ConversionState, node: SyntaxTreeNode) -> Element:
    # markdown-it writes column alignment as style="text-align:left"
    style = str(node.attrs.get("style", ""))
    if style.startswith("text-align:"):
        return _element(node.type, state, node, align=style.removeprefix("text-align:"))
    return _element(node.type, state, node)


def thematic_break(state: ConversionState, node: SyntaxTreeNode) -> Element:
    return Element(tag_name="hr")


def raw_html(state: ConversionState, node: SyntaxTreeNode) -> Raw:
    return Raw(value=node.content)


def nothing(state: ConversionState, node: SyntaxTreeNode) -> None:
    return None


def _container(tag_name: str) -> Handler:
    def convert(state: ConversionState, node: SyntaxTreeNode) -> Element:
        return _element(tag_name, state, node)

    return convert


DEFAULT_HANDLERS: dict[str, Handler] = {
    "paragraph": paragraph,
    "heading": heading,
    "inline": inline,
    "text": text,
    "text_special": text,
    "softbreak": softbreak,
    "hardbreak": hardbreak,
    "strong": _container("strong"),
    "em": _container("em"),
    "s": _container("del"),
    "code_inline": code_inline,
    "fence": code_block,
    "code_block": code_block,
    "link": link,
    "image": image,
    "blockquote": _container("blockquote"),
    "hr": thematic_break,
    "bullet_list": _container("ul"),
    "ordered_list": ordered_list,
    "list_item": _container("li"),
    "table": _container("table"),
    "thead": _container("thead"),
    "tbody": _container("tbody"),
    "tr": _container("tr"),
    "th": table_cell,
    "td": table_cell,
    "html_block": raw_html,
    "html_inline": raw_html,
    "footnote_ref": footnote_reference,
    "footnote_block": collect_definitions,
    "footnote_anchor": nothing,
}


def default_handler(state: ConversionState, node: SyntaxTreeNode) -> HandlerResult:
    """Convert a node with the built-in handler for its type."""
    handler = DEFAULT_HANDLERS.get(node.type)
    if handler:
        return handler(state, node)
    return unknown(state, node)


def unknown(state: ConversionState, node: SyntaxTreeNode) -> HandlerResult:
    """Node types without a handler: keep their content, drop the markup."""
    logger.debug(f"No handler for markdown node type {node.type!r}")
    if node.children:
        return state.all(node)
    if not node.is_root and node.content:
        return Text(value=node.content)
    return None
