"""Heading sections for the top level of a document.

With ``heading_sections`` enabled, every heading starts a
``<section class="p-entry-section -hdgN">`` holding the heading and all content
up to the next heading of the same or a higher rank, so deeper headings nest.
The heading itself is wrapped together with a ``§`` self-link. A heading
without content is a section break and renders as
``<hr class="p-section-break">``.
"""

from urllib.parse import quote

from markdown_it.tree import SyntaxTreeNode
from slugify import slugify

from blogmark.markdown.ids import section_id
from blogmark.markdown.mdast import phrasing_children, to_plain_text
from blogmark.markdown.models import Element, ElementContent, Text
from blogmark.markdown.state import ConversionState

SELF_LINK_TEXT = "§"


def section_slug(state: ConversionState, heading: SyntaxTreeNode) -> str:
    """Slug of a heading's text, unique within the document (``intro``, ``intro-1``, ...)."""
    base = slugify(to_plain_text(heading), allow_unicode=True) or "heading"
    slug, n = base, 0
    while slug in state.section_ids:
        n += 1
        slug = f"{base}-{n}"
    state.section_ids.add(slug)
    return slug


def _depth(node: SyntaxTreeNode) -> int:
    return int(node.tag[1])


def _closes(node: SyntaxTreeNode, depth: int) -> bool:
    return node.type == "heading" and _depth(node) <= depth


def wrap_sections(state: ConversionState, nodes: list[SyntaxTreeNode]) -> list[ElementContent]:
    """Convert sibling nodes, grouping them into sections at each heading."""
    converted: list[ElementContent] = []
    i = 0
    while i < len(nodes):
        node = nodes[i]
        if node.type != "heading":
            converted.extend(state.one(node))
            i += 1
            continue

        end = i + 1
        while end < len(nodes) and not _closes(nodes[end], _depth(node)):
            end += 1

        if next(phrasing_children(node), None) is None:
            converted.append(Element(tag_name="hr", properties={"class": ["p-section-break"]}))
            converted.extend(wrap_sections(state, nodes[i + 1 : end]))
        else:
            converted.append(_section(state, node, nodes[i + 1 : end]))
        i = end
    return converted


def _section(state: ConversionState, heading: SyntaxTreeNode, body: list[SyntaxTreeNode]) -> Element:
    id_ = section_id(section_slug(state, heading))
    self_link = Element(
        tag_name="p",
        properties={"class": ["p-entry-section__self-link"]},
        children=[
            Element(
                tag_name="a",
                properties={"href": f"#{quote(id_, safe='-_.!~*()')}", "class": ["c-self-link"]},
                children=[Text(value=SELF_LINK_TEXT)],
            )
        ],
    )
    header = Element(
        tag_name="div",
        properties={"class": ["p-entry-section__hdg"]},
        children=[*state.one(heading), self_link],
    )
    return Element(
        tag_name="section",
        properties={"class": ["p-entry-section", f"-hdg{_depth(heading)}"], "id": id_},
        children=[header, *wrap_sections(state, body)],
    )
