#!/usr/bin/env python3
"""
conversion_result.py
--------------------

Outcome of converting one entry during an export.

A result either carries the entry's Markdown or marks a failure with its
kind and reason. The packager keeps one result per attempted entry, in
export order.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# ---- Local imports ----
from journal2md.dataclasses.index_entry import IndexEntry


class FailureKind(str, Enum):
    """Why an entry produced no Markdown."""

    MISSING_FILE = "missing_file"
    CONVERSION_FAILURE = "conversion_failure"


@dataclass(frozen=True)
class ConversionResult:
    """
    Attributes:
        entry: The entry that was attempted
        markdown: Converted document, None on failure
        failure: Failure kind, None on success
        reason: Human-readable failure reason
        source_path: Resolved path in the file source, when one was found
    """

    entry: IndexEntry
    markdown: Optional[str] = None
    failure: Optional[FailureKind] = None
    reason: str = ""
    source_path: Optional[str] = None

    @classmethod
    def success(
        cls, entry: IndexEntry, markdown: str, source_path: Optional[str] = None
    ) -> ConversionResult:
        return cls(entry=entry, markdown=markdown, source_path=source_path)

    @classmethod
    def failed(
        cls,
        entry: IndexEntry,
        kind: FailureKind,
        reason: str,
        source_path: Optional[str] = None,
    ) -> ConversionResult:
        return cls(entry=entry, failure=kind, reason=reason, source_path=source_path)

    @property
    def ok(self) -> bool:
        return self.failure is None
