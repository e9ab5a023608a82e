import pytest

from blogmark.config import MarkdownSettings


@pytest.fixture
def settings() -> MarkdownSettings:
    """Settings with explicit values so the environment cannot leak in."""
    return MarkdownSettings(
        heading_start_level=1,
        heading_sections=False,
        footnote_heading="Footnotes",
        footnote_backref_text="↩ Back",
    )
