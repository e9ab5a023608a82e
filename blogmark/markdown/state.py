"""Per-conversion state handed to node handlers."""

from collections.abc import Callable

from markdown_it.tree import SyntaxTreeNode

from blogmark.config import MarkdownSettings
from blogmark.markdown.models import ElementContent, HandlerResult

Handler = Callable[["ConversionState", SyntaxTreeNode], HandlerResult]


class ConversionState:
    """State of one document conversion.

    Handlers recurse into children through ``all`` instead of walking the tree
    themselves, so node types they do not customise are still converted by the
    dispatcher. Created fresh for every document and never reused.
    """

    def __init__(
        self,
        dispatch: Handler,
        settings: MarkdownSettings,
        entry_id: int | None = None,
    ):
        self._dispatch = dispatch
        self.settings = settings
        self.entry_id = entry_id
        # Footnote ids in order of first reference
        self.footnote_order: list[int] = []
        # Footnote id -> number of references seen so far
        self.footnote_counts: dict[int, int] = {}
        # Footnote id -> definition node, collected from the footnote block
        self.footnote_definitions: dict[int, SyntaxTreeNode] = {}
        # Footnote id -> element id key (see footnotes.footnote_key)
        self.footnote_keys: dict[int, str] = {}
        # Section ids handed out so far (see sections.section_slug)
        self.section_ids: set[str] = set()

    def one(self, node: SyntaxTreeNode) -> list[ElementContent]:
        """Convert a single node; always returns a list (empty when elided)."""
        result = self._dispatch(self, node)
        if result is None:
            return []
        if isinstance(result, list):
            return result
        return [result]

    def all(self, node: SyntaxTreeNode) -> list[ElementContent]:
        """Convert all children of a node, in order."""
        converted: list[ElementContent] = []
        for child in node.children:
            converted.extend(self.one(child))
        return converted
