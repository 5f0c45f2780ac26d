#!/usr/bin/env python3
"""
index_parser.py
---------------
Recover the entry list from the export's index document.

The index is a plain page of links. Each journal day is a link labelled
``"D. Mon YYYY"`` optionally followed by ``" — Title"``:

    <p class="p1"><span class="s1">
      <a href="Entries/4. Feb 2026.html">4. Feb 2026 — My Day</a>
    </span></p>

Every other link (navigation, assets) is skipped without complaint.

Programmatic API:
    from journal2md.pipeline.index_parser import parse_index

    parsed = parse_index(index_html)
    parsed.entries, parsed.min_date, parsed.max_date
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

# --- Third party imports ---
from bs4 import BeautifulSoup

# --- Local imports ---
from journal2md.dataclasses.index_entry import IndexEntry
from journal2md.pipeline.configs import HTML_PARSER


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedIndex:
    """
    Entries of an index document, in document order, with their date bounds.

    Attributes:
        entries: Parsed entries as they appear in the index
        min_date: Earliest entry date, None when there are no entries
        max_date: Latest entry date, None when there are no entries
    """

    entries: Tuple[IndexEntry, ...]
    min_date: Optional[date]
    max_date: Optional[date]

    def __len__(self) -> int:
        return len(self.entries)


def parse_index(markup: str) -> ParsedIndex:
    """
    Parse index markup into entries.

    Args:
        markup: Raw index document

    Returns:
        ParsedIndex; empty (not an error) when no link carries a dated label
    """
    soup = BeautifulSoup(markup, HTML_PARSER)

    entries: List[IndexEntry] = []
    min_date: Optional[date] = None
    max_date: Optional[date] = None

    for anchor in soup.select("a[href]"):
        entry = IndexEntry.from_anchor(anchor.get_text(), anchor.get("href", ""))
        if entry is None:
            continue

        entries.append(entry)
        if min_date is None or entry.date < min_date:
            min_date = entry.date
        if max_date is None or entry.date > max_date:
            max_date = entry.date

    logger.debug(f"Parsed {len(entries)} entries from index")
    return ParsedIndex(entries=tuple(entries), min_date=min_date, max_date=max_date)
