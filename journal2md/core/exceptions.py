#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the journal2md project.

Errors fall in two groups. Fatal errors abort an export before or after
the per-entry loop. Per-entry errors are recorded by the packager, counted
and logged, and never abort the batch.

Exception Hierarchy:
    Exception (built-in)
    ├── NoIndexFoundError - No index document in the supplied export (fatal)
    ├── NoEntriesParsedError - Index holds no recognizable entries (fatal)
    ├── EntryError - Base for per-entry failures (non-fatal)
    │   ├── MissingFileError - No document backs an index entry
    │   └── EntryConversionError - Reading or extracting an entry failed
    ├── PackagingError - Archive/document finalize failed (fatal)
    ├── ConfigError - Malformed configuration file (fatal)
    ├── ValidationError - Invalid user input (date range)
    └── TemporalFileError - Temporary file management errors

Usage:
    from journal2md.core.exceptions import MissingFileError, PackagingError

    try:
        path = resolve_entry(source, entry)
    except MissingFileError as e:
        stats.errors += 1
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from journal2md.dataclasses.index_entry import IndexEntry


class NoIndexFoundError(Exception):
    """
    Exception raised when an export has no usable index document.

    Raised before any conversion is attempted:
    - The supplied folder or archive is empty
    - No ``index.html`` exists near the root of the export

    Examples:
        >>> raise NoIndexFoundError("No index.html found near the export root")
        >>> raise NoIndexFoundError("Export is empty: ~/Downloads/Journal")
    """

    pass


class NoEntriesParsedError(Exception):
    """
    Exception raised when the index exists but lists no journal entries.

    None of the index links carried a ``D. Mon YYYY`` label, so there is
    nothing to convert.

    Examples:
        >>> raise NoEntriesParsedError("index.html contains no dated entries")
    """

    pass


class EntryError(Exception):
    """
    Base exception for per-entry failures.

    Carries the entry that failed so the packager can record a failure
    marker for it and move on to the next entry.

    Attributes:
        entry: The IndexEntry whose conversion failed
    """

    def __init__(self, message: str, entry: "IndexEntry | None" = None) -> None:
        super().__init__(message)
        self.entry = entry


class MissingFileError(EntryError):
    """
    Exception for entries whose backing document cannot be found.

    Raised by the resolver when no path in the file source ends with the
    entry's href.

    Examples:
        >>> raise MissingFileError("No file for Entries/4. Feb 2026.html", entry)
    """

    pass


class EntryConversionError(EntryError):
    """
    Exception for failures while reading or converting one entry.

    Raised when:
    - The entry document cannot be read or decoded
    - Extraction or Markdown conversion raises

    Examples:
        >>> raise EntryConversionError("Failed to convert 'My Day': ...", entry)
    """

    pass


class PackagingError(Exception):
    """
    Exception for archive or document finalize failures.

    Raised after the per-entry loop when the output artifact cannot be
    written. The whole export is aborted; no partial artifact is left in
    the output directory.

    Examples:
        >>> raise PackagingError("Cannot write Journal_Export_2026-02-04.zip: disk full")
    """

    pass


class ConfigError(Exception):
    """
    Exception for malformed configuration files.

    Examples:
        >>> raise ConfigError("Unknown extraction setting: 'body_klass'")
        >>> raise ConfigError("Config root must be a mapping")
    """

    pass


class ValidationError(Exception):
    """
    Exception for invalid user input.

    Examples:
        >>> raise ValidationError("Start date 2026-02-01 is after end date 2026-01-01")
        >>> raise ValidationError("Selected range contains no entries")
    """

    pass


class TemporalFileError(Exception):
    """
    Exception for temporary file management errors.

    Raised when staging files or directories cannot be created.

    Examples:
        >>> raise TemporalFileError("Cannot create temp dir: /tmp not writable")
    """

    pass
