#!/usr/bin/env python3
"""
date_filter.py
--------------
Select entries by inclusive calendar-date range.

Filtering is pure: the same entries and range always give the same
subsequence, in the order the entries were given. It is cheap enough to
run on every range change.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Tuple

# --- Local imports ---
from journal2md.core.exceptions import ValidationError
from journal2md.dataclasses.index_entry import IndexEntry


@dataclass(frozen=True)
class FilterRange:
    """
    Inclusive date range.

    Attributes:
        start: First day included
        end: Last day included

    Raises:
        ValidationError: If start is after end
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValidationError(
                f"Start date {self.start.isoformat()} is after end date {self.end.isoformat()}"
            )

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day <= self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()} → {self.end.isoformat()}"

    @classmethod
    def spanning(cls, entries: Iterable[IndexEntry]) -> Optional[FilterRange]:
        """Range from the earliest to the latest entry; None when empty."""
        dates = [entry.date for entry in entries]
        if not dates:
            return None
        return cls(start=min(dates), end=max(dates))


@dataclass(frozen=True)
class FilterResult:
    """
    Entries within a range.

    Attributes:
        entries: Matching entries in input order
        filter_range: The range applied
    """

    entries: Tuple[IndexEntry, ...]
    filter_range: FilterRange

    @property
    def count(self) -> int:
        return len(self.entries)

    def __len__(self) -> int:
        return self.count


def filter_entries(
    entries: Iterable[IndexEntry], filter_range: FilterRange
) -> FilterResult:
    """
    Keep the entries dated within the range, bounds included.

    Args:
        entries: All parsed entries
        filter_range: Inclusive range

    Returns:
        FilterResult with the matching entries and their count
    """
    selected = tuple(e for e in entries if e.date in filter_range)
    return FilterResult(entries=selected, filter_range=filter_range)
