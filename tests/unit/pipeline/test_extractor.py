"""
test_extractor.py
-----------------
Unit tests for journal2md.pipeline.extractor.

Tests both extraction strategies, the strategy chain and the generated
entry header.
"""
from datetime import date
from unittest.mock import MagicMock

import pytest
from bs4 import BeautifulSoup

from journal2md.dataclasses.index_entry import IndexEntry
from journal2md.pipeline.configs import ExtractionConfig
from journal2md.pipeline.extractor import (
    ExtractionStrategy,
    MarkedParagraphStrategy,
    NoiseStrippingStrategy,
    extract_body,
    render_entry,
    render_header,
)


@pytest.fixture
def entry():
    return IndexEntry(
        date=date(2026, 2, 4),
        original_text="4. Feb 2026 — My Day",
        href="Entries/4. Feb 2026.html",
        title="My Day",
    )


class TestMarkedParagraphs:
    """Tier 1: body-text paragraphs directly under <body>."""

    def test_marked_paragraphs_converted(self, marked_entry_html):
        body = extract_body(marked_entry_html)
        assert body == "First paragraph with **bold** text.\n\nSecond paragraph.\n\n"

    def test_wrapper_paragraph_excluded(self, marked_entry_html):
        """Paragraphs with another class never contribute text."""
        body = extract_body(marked_entry_html)
        assert "Wrapper text" not in body

    def test_layout_blocks_excluded(self, marked_entry_html):
        body = extract_body(marked_entry_html)
        assert "Wednesday" not in body
        assert "assetGrid" not in body

    def test_unclassed_paragraph_with_text_included(self):
        markup = "<body><p>Plain paragraph</p><p class='p2'>Marked</p></body>"
        assert extract_body(markup) == "Plain paragraph\n\nMarked\n\n"

    def test_unclassed_blank_paragraph_skipped(self):
        markup = "<body><p>   </p><p class='p2'>Marked</p></body>"
        assert extract_body(markup) == "Marked\n\n"

    def test_body_class_among_several(self):
        """The marker class counts even next to other classes."""
        markup = "<body><p class='p2 indent'>Indented</p></body>"
        assert extract_body(markup) == "Indented\n\n"

    def test_nested_paragraphs_not_considered(self):
        """Only direct children of <body> are examined by the first tier."""
        markup = (
            "<body><div><p class='p2'>Nested</p></div>"
            "<p class='p2'>Top level</p></body>"
        )
        assert extract_body(markup) == "Top level\n\n"

    def test_document_order(self):
        markup = "<body><p class='p2'>one</p><p>two</p><p class='p2'>three</p></body>"
        assert extract_body(markup) == "one\n\ntwo\n\nthree\n\n"

    def test_custom_body_class(self):
        markup = "<body><p class='bodyText'>Custom</p><p class='p2'>Default</p></body>"
        config = ExtractionConfig(body_class="bodyText")
        assert extract_body(markup, config=config) == "Custom\n\n"

    def test_layout_nested_in_wrapper_paragraph(self, nested_entry_html):
        """Header and photos wrapped in <p class="p1"><span> stay out of the body."""
        assert extract_body(nested_entry_html) == "Text 1\n\nText 2\n\n"

    def test_nested_layout_text_excluded(self, nested_entry_html):
        body = extract_body(nested_entry_html)
        assert "Saturday" not in body
        assert "Quiet Weekend" not in body
        assert "IMG_0001" not in body


class TestNoiseStripping:
    """Tier 2: whole body minus noise blocks."""

    def test_fallback_used_without_marked_paragraphs(self, unmarked_entry_html):
        body = extract_body(unmarked_entry_html)
        assert "## Morning" in body
        assert "Walked to the lake." in body

    @pytest.mark.parametrize(
        "noise",
        [
            "Header noise",
            "Title noise",
            "Asset noise",
            "What made you smile today?",
            "Banner noise",
            "script noise",
        ],
    )
    def test_noise_removed(self, unmarked_entry_html, noise):
        assert noise not in extract_body(unmarked_entry_html)

    def test_style_removed(self):
        markup = "<body><style>.x { color: red }</style><div>Kept</div></body>"
        assert extract_body(markup) == "Kept"

    def test_whitespace_only_first_tier_triggers_fallback(self):
        """Marked paragraphs that convert to blank text count as empty."""
        markup = "<body><p class='p2'> </p><div>Fallback text</div></body>"
        assert extract_body(markup) == "Fallback text"

    def test_document_not_modified(self):
        """The fallback strips noise from a copy of the body."""
        strategy = NoiseStrippingStrategy()
        soup = BeautifulSoup("<body><div class='title'>T</div><div>B</div></body>", "lxml")
        converter = MagicMock()
        converter.convert.return_value = "B"
        strategy.extract(soup.body, converter, ExtractionConfig())
        assert soup.select_one(".title") is not None

    def test_empty_document(self):
        assert extract_body("") == ""


class TestStrategyChain:
    """Test the ordered strategy chain."""

    def test_first_non_blank_result_wins(self):
        first = MagicMock(spec=ExtractionStrategy)
        first.name = "first"
        first.extract.return_value = "from first"
        second = MagicMock(spec=ExtractionStrategy)
        second.name = "second"

        assert extract_body("<body/>", strategies=[first, second]) == "from first"
        second.extract.assert_not_called()

    def test_blank_result_falls_through(self):
        first = MagicMock(spec=ExtractionStrategy)
        first.name = "first"
        first.extract.return_value = "  \n"
        second = MagicMock(spec=ExtractionStrategy)
        second.name = "second"
        second.extract.return_value = "from second"

        assert extract_body("<body/>", strategies=[first, second]) == "from second"

    def test_extra_strategy_appended(self):
        """Additional tiers run only when the built-in ones find nothing."""
        class Constant(ExtractionStrategy):
            name = "constant"

            def extract(self, body, converter, config):
                return "constant"

        chain = [MarkedParagraphStrategy(), NoiseStrippingStrategy(), Constant()]
        markup = "<body><div class='title'>only noise</div></body>"
        assert extract_body(markup, strategies=chain) == "constant"

    def test_injected_converter(self):
        converter = MagicMock()
        converter.convert.side_effect = lambda html: html.upper()
        markup = "<body><p class='p2'>text</p></body>"
        assert extract_body(markup, converter=converter) == "TEXT\n\n"


class TestRenderEntry:
    """Test header generation and complete entry documents."""

    def test_header(self, entry):
        assert render_header(entry) == "# My Day\n\n*Date: 04/02/2026*\n\n---\n\n"

    def test_header_date_format(self, entry):
        config = ExtractionConfig(date_format="%Y-%m-%d")
        assert "*Date: 2026-02-04*" in render_header(entry, config)

    def test_header_uses_index_metadata(self, entry, unmarked_entry_html):
        """Title and date come from the index, not the document's title block."""
        markdown = render_entry(entry, unmarked_entry_html)
        assert markdown.startswith("# My Day\n\n*Date: 04/02/2026*\n\n---\n\n")
        assert "Title noise" not in markdown

    def test_full_document(self, entry, marked_entry_html):
        assert render_entry(entry, marked_entry_html) == (
            "# My Day\n\n*Date: 04/02/2026*\n\n---\n\n"
            "First paragraph with **bold** text.\n\nSecond paragraph.\n\n"
        )
