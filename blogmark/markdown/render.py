"""HTML serialization of the presentation tree."""

import html

from blogmark.markdown.models import Element, ElementContent, PropertyValue, Raw, Root, Text

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)


def render_html(root: Root) -> str:
    """Serialize a presentation tree; top-level nodes are separated by newlines."""
    return "\n".join(render_node(node) for node in root.children)


def render_node(node: ElementContent) -> str:
    if isinstance(node, Text):
        return html.escape(node.value, quote=False)
    if isinstance(node, Raw):
        return node.value
    return _render_element(node)


def _render_element(element: Element) -> str:
    attributes = "".join(_render_attribute(name, value) for name, value in element.properties.items())
    if element.tag_name in VOID_ELEMENTS:
        return f"<{element.tag_name}{attributes}/>"
    inner = "".join(render_node(child) for child in element.children)
    return f"<{element.tag_name}{attributes}>{inner}</{element.tag_name}>"


def _render_attribute(name: str, value: PropertyValue) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return f" {name}"
    if isinstance(value, list):
        value = " ".join(value)
    return f' {name}="{html.escape(str(value))}"'
