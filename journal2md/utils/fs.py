#!/usr/bin/env python3
"""
fs.py
-------------------
Filename helpers for export artifacts.

Functions:
    sanitize_filename_component: Replace characters unsafe in filenames
    entry_filename: Archive member name for one entry
    archive_filename: Name of the multi-file export
    document_filename: Name of the single-document export
    deduplicate_filename: Suffix a name already used in an artifact

Usage:
    from journal2md.utils.fs import entry_filename

    entry_filename(date(2026, 2, 4), "A/B")  # '2026-02-04 - A_B.md'
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import date
from pathlib import PurePosixPath
from typing import Container

UNSAFE_FILENAME_CHARS = re.compile(r'[/\\:"*?<>|]')


def sanitize_filename_component(text: str) -> str:
    """
    Replace each of ``/ \\ : " * ? < > |`` with an underscore.

    Examples:
        >>> sanitize_filename_component("A/B:C*D")
        'A_B_C_D'
    """
    return UNSAFE_FILENAME_CHARS.sub("_", text)


def entry_filename(entry_date: date, title: str) -> str:
    """Archive member name: ``<YYYY-MM-DD> - <sanitized title>.md``."""
    return f"{entry_date.isoformat()} - {sanitize_filename_component(title)}.md"


def archive_filename(today: date) -> str:
    return f"Journal_Export_{today.isoformat()}.zip"


def document_filename(today: date) -> str:
    return f"Journal_Full_Export_{today.isoformat()}.md"


def deduplicate_filename(name: str, taken: Container[str]) -> str:
    """
    Return ``name``, or ``stem (n).suffix`` with the lowest free n >= 2.

    Examples:
        >>> deduplicate_filename("2026-02-04 - Untitled.md", {"2026-02-04 - Untitled.md"})
        '2026-02-04 - Untitled (2).md'
    """
    if name not in taken:
        return name

    path = PurePosixPath(name)
    n = 2
    while True:
        candidate = f"{path.stem} ({n}){path.suffix}"
        if candidate not in taken:
            return candidate
        n += 1
