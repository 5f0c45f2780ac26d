#!/usr/bin/env python3
"""
session.py
----------
Loaded state of one journal export.

A session bundles the file source with the entries parsed from its index.
It is built once per export and passed explicitly to the filter and the
packager, so several exports can be handled side by side.

Programmatic API:
    from journal2md.pipeline.session import ExportSession

    session = ExportSession.load(source, config, logger)
    selection = session.select(FilterRange(start, end))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

# --- Local imports ---
from journal2md.core.exceptions import NoEntriesParsedError
from journal2md.core.logging_manager import ExportLogger, safe_logger
from journal2md.dataclasses.index_entry import IndexEntry
from journal2md.pipeline.configs import DEFAULT_CONFIG, ExtractionConfig
from journal2md.pipeline.date_filter import FilterRange, FilterResult, filter_entries
from journal2md.pipeline.index_parser import parse_index
from journal2md.pipeline.resolver import FileSource, find_index_document


@dataclass(frozen=True)
class ExportSession:
    """
    Attributes:
        source: Export files, read-only
        index_path: Path of the index document within the source
        entries: Parsed entries in index order
        min_date: Earliest entry date
        max_date: Latest entry date
        config: Extraction settings used for this export
    """

    source: FileSource
    index_path: str
    entries: Tuple[IndexEntry, ...]
    min_date: date
    max_date: date
    config: ExtractionConfig = DEFAULT_CONFIG

    @classmethod
    def load(
        cls,
        source: FileSource,
        config: ExtractionConfig = DEFAULT_CONFIG,
        logger: Optional[ExportLogger] = None,
    ) -> ExportSession:
        """
        Locate and parse the index of an export.

        Args:
            source: Export file source
            config: Extraction settings
            logger: Optional logger

        Returns:
            ExportSession with at least one entry

        Raises:
            NoIndexFoundError: If the source is empty or has no index
            NoEntriesParsedError: If the index lists no dated entries
        """
        index_path = find_index_document(source, config)
        safe_logger(logger).log_debug(f"Using index document {index_path}")

        parsed = parse_index(source.read_text(index_path))
        if not parsed.entries or parsed.min_date is None or parsed.max_date is None:
            raise NoEntriesParsedError(
                f"No journal entries found in {index_path}; nothing to convert"
            )

        safe_logger(logger).log_operation(
            "index_parsed",
            {
                "index": index_path,
                "entries": len(parsed.entries),
                "min_date": parsed.min_date,
                "max_date": parsed.max_date,
            },
        )
        return cls(
            source=source,
            index_path=index_path,
            entries=parsed.entries,
            min_date=parsed.min_date,
            max_date=parsed.max_date,
            config=config,
        )

    def default_range(self) -> FilterRange:
        return FilterRange(start=self.min_date, end=self.max_date)

    def range_from(
        self, start: Optional[date] = None, end: Optional[date] = None
    ) -> FilterRange:
        """Range with missing bounds taken from the entry dates."""
        return FilterRange(start=start or self.min_date, end=end or self.max_date)

    def select(self, filter_range: Optional[FilterRange] = None) -> FilterResult:
        return filter_entries(self.entries, filter_range or self.default_range())

    def describe(self) -> str:
        return (
            f"Found {len(self.entries)} entries from "
            f"{self.min_date.strftime(self.config.date_format)} to "
            f"{self.max_date.strftime(self.config.date_format)}"
        )
