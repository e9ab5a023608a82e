"""Footnote references and the footnote section appended to a document.

References are numbered in the order they are first converted. Every reference
links to ``#footnote-KEY`` and the footnote body links back to the first
reference, ``#footnote-ref-KEY``. The key is the footnote number, scoped to the
entry (``12-1``) when an entry id is given. Labels never appear in ids: they
are case-sensitive and may contain ``ref-`` or a ``-2`` suffix themselves.
"""

from markdown_it.tree import SyntaxTreeNode

from blogmark.markdown.ids import annotation_id, footnote_id, footnote_reference_id
from blogmark.markdown.models import Element, ElementContent, Text
from blogmark.markdown.state import ConversionState


def footnote_key(state: ConversionState, number: int) -> str:
    """Key shared by a footnote body id and its reference ids."""
    if state.entry_id is not None:
        return annotation_id(state.entry_id, number)
    return str(number)


def footnote_reference(state: ConversionState, node: SyntaxTreeNode) -> Element:
    """Convert a ``footnote_ref`` node to a numbered annotation link."""
    note = node.meta["id"]

    count = state.footnote_counts.get(note)
    if count is None:
        state.footnote_order.append(note)
        number = len(state.footnote_order)
        state.footnote_keys[note] = footnote_key(state, number)
        count = 0
    else:
        number = state.footnote_order.index(note) + 1

    count += 1
    state.footnote_counts[note] = count

    key = state.footnote_keys[note]
    reference_id = footnote_reference_id(key)
    # Keys hold at most one "-", so a suffixed id never equals another key's id
    if count > 1:
        reference_id = f"{reference_id}-{count}"

    return Element(
        tag_name="span",
        properties={"class": ["c-annotate"]},
        children=[
            Element(
                tag_name="a",
                properties={"href": f"#{footnote_id(key)}", "id": reference_id},
                children=[Text(value=f"[{number}]")],
            )
        ],
    )


def collect_definitions(state: ConversionState, node: SyntaxTreeNode) -> None:
    """Remember the definitions of a ``footnote_block``; nothing is emitted in place."""
    for child in node.children:
        if child.type == "footnote":
            state.footnote_definitions[child.meta["id"]] = child


def build_footnote_section(state: ConversionState) -> Element | None:
    """Build the footnote list for every footnote referenced in the document."""
    if not state.footnote_order:
        return None

    items = [
        _footnote_item(state, number, note)
        for number, note in enumerate(state.footnote_order, start=1)
    ]

    return Element(
        tag_name="section",
        properties={"class": ["p-footnote"]},
        children=[
            Element(
                tag_name="h2",
                properties={"class": ["p-footnote__hdg"]},
                children=[Text(value=state.settings.footnote_heading)],
            ),
            Element(tag_name="ul", properties={"class": ["p-footnote__list"]}, children=items),
        ],
    )


def _footnote_item(state: ConversionState, number: int, note: int) -> Element:
    key = state.footnote_keys[note]
    definition = state.footnote_definitions.get(note)
    blocks = state.all(definition) if definition is not None else []

    # The first paragraph becomes the footnote text, further blocks follow it
    body: list[ElementContent] = []
    rest = blocks
    if blocks and isinstance(blocks[0], Element) and blocks[0].tag_name == "p":
        body, rest = blocks[0].children, blocks[1:]

    content = Element(
        tag_name="p",
        properties={"class": ["p-footnote__content"]},
        children=[
            Element(tag_name="span", properties={"id": footnote_id(key)}, children=body),
            Text(value=" "),
            Element(
                tag_name="a",
                properties={"href": f"#{footnote_reference_id(key)}", "class": ["p-footnote__backref"]},
                children=[Text(value=state.settings.footnote_backref_text)],
            ),
        ],
    )

    return Element(
        tag_name="li",
        children=[
            Element(tag_name="span", properties={"class": ["p-footnote__no"]}, children=[Text(value=f"{number}.")]),
            content,
            *rest,
        ],
    )
