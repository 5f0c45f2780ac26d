#!/usr/bin/env python3
"""
index_entry.py
-------------------

Defines the IndexEntry dataclass: one journal day as listed in the export's
index document.

Index links are labelled ``"4. Feb 2026 — My Day"`` or just
``"15. Dec 2025"`` when the day has no title. ``parse_anchor_text`` turns
such a label into a date and a title; labels that do not start with a date
belong to navigation links and yield nothing.

Entries are created once while the index is parsed and never change.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Constants -----
MONTH_ABBREVIATIONS = {
    "Jan": 1, "Feb": 2, "Mar": 3, "Apr": 4, "May": 5, "Jun": 6,
    "Jul": 7, "Aug": 8, "Sep": 9, "Oct": 10, "Nov": 11, "Dec": 12,
}

ANCHOR_DATE_RE = re.compile(
    r"^(\d{1,2})\.\s+(" + "|".join(MONTH_ABBREVIATIONS) + r")\s+(\d{4})"
)
"""``D. Mon YYYY`` at the very start of a label; month names are case-sensitive."""

TITLE_DELIMITER = "—"
DEFAULT_TITLE = "Untitled"


def parse_anchor_text(text: str) -> Optional[Tuple[date, str]]:
    """
    Parse an index link label into (date, title).

    Args:
        text: Link label, already stripped of surrounding whitespace

    Returns:
        (date, title) when the label starts with ``D. Mon YYYY``, else None.
        The title is whatever follows the first em-dash, trimmed, or
        ``"Untitled"`` when there is no em-dash or nothing after it.

    Examples:
        >>> parse_anchor_text("4. Feb 2026 — My Day")
        (datetime.date(2026, 2, 4), 'My Day')
        >>> parse_anchor_text("15. Dec 2025")
        (datetime.date(2025, 12, 15), 'Untitled')
        >>> parse_anchor_text("Back to top") is None
        True
    """
    match = ANCHOR_DATE_RE.match(text)
    if not match:
        return None

    day, month_abbr, year = match.groups()
    try:
        entry_date = date(int(year), MONTH_ABBREVIATIONS[month_abbr], int(day))
    except ValueError:
        logger.debug(f"Skipping label with impossible date: {text!r}")
        return None

    title = DEFAULT_TITLE
    if TITLE_DELIMITER in text:
        title = text.split(TITLE_DELIMITER, 1)[1].strip() or DEFAULT_TITLE

    return entry_date, title


# ----- Dataclass -----
@dataclass(frozen=True)
class IndexEntry:
    """
    A journal entry as listed in the index document.

    Attributes:
        date: Calendar day of the entry
        original_text: Link label exactly as found (trimmed)
        href: Link target as written in the index, relative to it
        title: Entry title, ``"Untitled"`` when the label has none
    """

    date: date
    original_text: str
    href: str
    title: str = DEFAULT_TITLE

    @classmethod
    def from_anchor(cls, text: str, href: str) -> Optional[IndexEntry]:
        """
        Build an entry from an index link, or None for non-entry links.

        Args:
            text: Link label
            href: Link target attribute, stored verbatim
        """
        if not href:
            return None

        label = text.strip()
        parsed = parse_anchor_text(label)
        if parsed is None:
            return None

        entry_date, title = parsed
        return cls(date=entry_date, original_text=label, href=href, title=title)

    def __str__(self) -> str:
        return f"{self.date.isoformat()} - {self.title}"
