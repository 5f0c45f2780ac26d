"""
test_index_entry.py
-------------------
Unit tests for journal2md.dataclasses.index_entry.

Tests anchor label parsing and IndexEntry construction from index links.
"""
from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from journal2md.dataclasses.index_entry import (
    DEFAULT_TITLE,
    MONTH_ABBREVIATIONS,
    IndexEntry,
    parse_anchor_text,
)


class TestParseAnchorText:
    """Test parse_anchor_text function."""

    def test_date_and_title(self):
        """Label with em-dash yields date and trimmed title."""
        assert parse_anchor_text("4. Feb 2026 — My Day") == (date(2026, 2, 4), "My Day")

    def test_date_without_title(self):
        """Label without em-dash is titled 'Untitled'."""
        assert parse_anchor_text("15. Dec 2025") == (date(2025, 12, 15), "Untitled")

    @pytest.mark.parametrize("abbr,month", sorted(MONTH_ABBREVIATIONS.items()))
    def test_every_month_abbreviation(self, abbr, month):
        """Each of the twelve abbreviations maps to its month."""
        parsed = parse_anchor_text(f"1. {abbr} 2024")
        assert parsed is not None
        assert parsed[0] == date(2024, month, 1)

    def test_two_digit_day(self):
        """Days with two digits are parsed exactly."""
        assert parse_anchor_text("31. Oct 1999 — Halloween")[0] == date(1999, 10, 31)

    def test_title_keeps_text_after_first_dash(self):
        """Everything after the first em-dash belongs to the title."""
        _, title = parse_anchor_text("2. Jan 2026 — Plans — and more")
        assert title == "Plans — and more"

    def test_empty_title_after_dash_is_untitled(self):
        """An em-dash followed by nothing falls back to the default title."""
        assert parse_anchor_text("2. Jan 2026 —   ")[1] == DEFAULT_TITLE

    def test_hyphen_is_not_a_title_delimiter(self):
        """Only the em-dash separates date and title."""
        _, title = parse_anchor_text("2. Jan 2026 - Plans")
        assert title == DEFAULT_TITLE

    @pytest.mark.parametrize(
        "text",
        [
            "About this export",
            "Feb 4 2026 — My Day",
            "4 Feb 2026",
            "4. feb 2026",
            "4. FEB 2026",
            "4. Foo 2026",
            "123. Feb 2026",
            "4. Feb 26",
            " My Day — 4. Feb 2026",
            "",
        ],
    )
    def test_non_entry_labels(self, text):
        """Labels not starting with 'D. Mon YYYY' yield no entry."""
        assert parse_anchor_text(text) is None

    def test_impossible_calendar_date(self):
        """A day that does not exist in the month yields no entry."""
        assert parse_anchor_text("31. Feb 2026 — Nope") is None

    def test_leap_day(self):
        """29 February is accepted in leap years."""
        assert parse_anchor_text("29. Feb 2024")[0] == date(2024, 2, 29)


class TestIndexEntry:
    """Test IndexEntry dataclass."""

    def test_from_anchor(self):
        """from_anchor fills every field and keeps href verbatim."""
        entry = IndexEntry.from_anchor("  4. Feb 2026 — My Day \n", "Entries/4.%20Feb%202026.html")
        assert entry == IndexEntry(
            date=date(2026, 2, 4),
            original_text="4. Feb 2026 — My Day",
            href="Entries/4.%20Feb%202026.html",
            title="My Day",
        )

    def test_from_anchor_non_entry(self):
        """Navigation links produce None."""
        assert IndexEntry.from_anchor("Back", "index.html") is None

    def test_from_anchor_without_href(self):
        """Dated labels without a link target are skipped."""
        assert IndexEntry.from_anchor("4. Feb 2026", "") is None

    def test_entries_are_immutable(self):
        """IndexEntry cannot be modified after creation."""
        entry = IndexEntry.from_anchor("4. Feb 2026", "a.html")
        with pytest.raises(FrozenInstanceError):
            entry.title = "Changed"

    def test_str(self):
        """String form shows ISO date and title."""
        entry = IndexEntry.from_anchor("4. Feb 2026 — My Day", "a.html")
        assert str(entry) == "2026-02-04 - My Day"
