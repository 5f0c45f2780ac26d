#!/usr/bin/env python3
"""
document.py
-------------------
Single Markdown document holding every exported entry.

Each entry is followed by a separator (blank line, ``---``, blank line)
before the next one.
"""
from __future__ import annotations

from pathlib import Path
from typing import IO, Optional

from journal2md.builders.base import ArtifactBuilder

ENTRY_SEPARATOR = "\n\n---\n\n"


class MarkdownDocumentBuilder(ArtifactBuilder):
    """Builds ``Journal_Full_Export_<date>.md``."""

    suffix = ".md"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._handle: Optional[IO[str]] = None

    def _open(self, staged: Path) -> None:
        self._handle = staged.open("w", encoding="utf-8")

    def _write(self, name: str, content: str) -> str:
        self._handle.write(content + ENTRY_SEPARATOR)
        return name

    def _close(self) -> None:
        if self._handle is not None and not self._handle.closed:
            self._handle.close()
