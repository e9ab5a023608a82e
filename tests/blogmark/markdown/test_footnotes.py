"""Tests for footnote references and the footnote section."""

import re
from collections import Counter

import pytest

from blogmark.config import MarkdownSettings
from blogmark.markdown import markdown_to_html, parse_markdown, transform_to_presentation
from blogmark.markdown.models import Element


def section_of(html: str) -> str:
    start = html.index('<section class="p-footnote">')
    return html[start:]


def duplicate_ids(html: str) -> list[str]:
    counts = Counter(re.findall(r' id="([^"]*)"', html))
    return [id_ for id_, count in counts.items() if count > 1]


class TestFootnoteReferences:
    def test_single_footnote(self, settings):
        html = markdown_to_html("Text[^1].\n\n[^1]: Note.", settings=settings)
        assert html == (
            '<p>Text<span class="c-annotate"><a href="#footnote-1" id="footnote-ref-1">[1]</a></span>.</p>\n'
            '<section class="p-footnote"><h2 class="p-footnote__hdg">Footnotes</h2>'
            '<ul class="p-footnote__list"><li><span class="p-footnote__no">1.</span>'
            '<p class="p-footnote__content"><span id="footnote-1">Note.</span> '
            '<a href="#footnote-ref-1" class="p-footnote__backref">↩ Back</a></p></li></ul></section>'
        )

    def test_numbered_in_reference_order(self, settings):
        html = markdown_to_html("B[^b] A[^a]\n\n[^a]: Alpha.\n\n[^b]: Beta.", settings=settings)
        assert '<a href="#footnote-1" id="footnote-ref-1">[1]</a>' in html
        assert '<a href="#footnote-2" id="footnote-ref-2">[2]</a>' in html
        section = section_of(html)
        assert section.index("Beta.") < section.index("Alpha.")

    def test_repeated_reference_keeps_number(self, settings):
        html = markdown_to_html("A[^x] B[^x]\n\n[^x]: X.", settings=settings)
        assert '<a href="#footnote-1" id="footnote-ref-1">[1]</a>' in html
        assert '<a href="#footnote-1" id="footnote-ref-1-2">[1]</a>' in html
        # One footnote body, linking back to the first reference
        assert section_of(html).count("<li>") == 1
        assert '<a href="#footnote-ref-1" class="p-footnote__backref">' in html

    def test_labels_do_not_appear_in_ids(self, settings):
        html = markdown_to_html("A[^Note]\n\n[^Note]: N.", settings=settings)
        assert 'href="#footnote-1"' in html
        assert '<span id="footnote-1">N.</span>' in html
        assert "Note" not in html

    def test_inline_footnote(self, settings):
        html = markdown_to_html("A^[inline note].", settings=settings)
        assert '<a href="#footnote-1" id="footnote-ref-1">[1]</a>' in html
        assert '<span id="footnote-1">inline note</span>' in html

    def test_undefined_reference_stays_text(self, settings):
        html = markdown_to_html("x[^missing]", settings=settings)
        assert html == "<p>x[^missing]</p>"

    def test_footnote_content_is_converted(self, settings):
        """Definitions go through the same handlers: **strong** becomes <em>."""
        html = markdown_to_html("A[^1]\n\n[^1]: Very **important**.", settings=settings)
        assert '<span id="footnote-1">Very <em>important</em>.</span>' in html

    def test_multi_paragraph_definition(self, settings):
        html = markdown_to_html("A[^n]\n\n[^n]: First.\n\n    Second.", settings=settings)
        section = section_of(html)
        assert '<span id="footnote-1">First.</span>' in section
        assert section.index("p-footnote__backref") < section.index("<p>Second.</p>")


class TestUniqueIds:
    @pytest.mark.parametrize(
        "markdown",
        [
            "A[^x] B[^ref-x]\n\n[^x]: X.\n\n[^ref-x]: R.",
            "A[^Note] B[^note]\n\n[^Note]: Upper.\n\n[^note]: Lower.",
            "A[^x] B[^x] C[^x-2]\n\n[^x]: X.\n\n[^x-2]: Two.",
            "A[^1] B[^2] C[^1] D^[inline]\n\n[^1]: One.\n\n[^2]: Two.",
        ],
    )
    def test_no_duplicate_ids(self, settings, markdown):
        html = markdown_to_html(markdown, settings=settings)
        assert duplicate_ids(html) == []

    def test_no_duplicate_ids_with_entry(self, settings):
        markdown = "A[^a] B[^b] C[^a] D[^a]\n\n[^a]: A.\n\n[^b]: B."
        html = markdown_to_html(markdown, settings=settings, entry_id=1)
        assert duplicate_ids(html) == []
        assert 'id="footnote-ref-1-1-2"' in html

    def test_case_variants_are_separate_footnotes(self, settings):
        html = markdown_to_html("A[^Note] B[^note]\n\n[^Note]: Upper.\n\n[^note]: Lower.", settings=settings)
        assert '<span id="footnote-1">Upper.</span>' in html
        assert '<span id="footnote-2">Lower.</span>' in html


class TestEntryScopedIds:
    def test_ids_use_entry_and_number(self, settings):
        html = markdown_to_html("A[^x] B[^y]\n\n[^x]: X.\n\n[^y]: Y.", settings=settings, entry_id=12)
        assert '<a href="#footnote-12-1" id="footnote-ref-12-1">[1]</a>' in html
        assert '<a href="#footnote-12-2" id="footnote-ref-12-2">[2]</a>' in html
        assert '<span id="footnote-12-1">X.</span>' in html
        assert '<a href="#footnote-ref-12-2" class="p-footnote__backref">' in html


class TestFootnoteSection:
    def test_no_section_without_references(self, settings):
        root = transform_to_presentation(parse_markdown("Plain text."), settings=settings)
        assert all(
            not (isinstance(child, Element) and child.tag_name == "section") for child in root.children
        )

    def test_section_is_last(self, settings):
        root = transform_to_presentation(parse_markdown("A[^1]\n\nB\n\n[^1]: N."), settings=settings)
        last = root.children[-1]
        assert isinstance(last, Element)
        assert last.tag_name == "section"
        assert last.properties == {"class": ["p-footnote"]}

    def test_texts_come_from_settings(self):
        settings = MarkdownSettings(footnote_heading="脚注", footnote_backref_text="↩ 戻る")
        html = markdown_to_html("A[^1]\n\n[^1]: N.", settings=settings)
        assert '<h2 class="p-footnote__hdg">脚注</h2>' in html
        assert ">↩ 戻る</a>" in html
