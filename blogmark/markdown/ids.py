"""Element ids for footnotes, annotations and heading sections.

Footnote bodies and their back-references must link to each other, so both ids
are derived here from the same key with disjoint prefixes.
"""

FOOTNOTE_PREFIX = "footnote-"
FOOTNOTE_REFERENCE_PREFIX = "footnote-ref-"


def footnote_id(id_: str) -> str:
    """Id of a footnote body, e.g. ``footnote-3``."""
    return f"{FOOTNOTE_PREFIX}{id_}"


def footnote_reference_id(id_: str) -> str:
    """Id of the reference pointing at a footnote, e.g. ``footnote-ref-3``."""
    return f"{FOOTNOTE_REFERENCE_PREFIX}{id_}"


def annotation_id(entry_id: int, sequence_no: int) -> str:
    """Annotation key scoped to a blog entry, e.g. ``12-1``."""
    return f"{entry_id}-{sequence_no}"


SECTION_PREFIX = "section-"


def section_id(slug: str) -> str:
    """Id of a heading section, e.g. ``section-introduction``.

    The prefix keeps heading slugs such as ``footnote-1`` apart from footnote ids.
    """
    return f"{SECTION_PREFIX}{slug}"
