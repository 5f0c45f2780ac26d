#!/usr/bin/env python3
"""
archive.py
-------------------
Zip archive of per-entry Markdown files.

Members are stored in the order they are added. Two entries on the same
day with the same title would collide on ``<date> - <title>.md``; the later
one is stored as ``<date> - <title> (2).md`` rather than replacing the
first.
"""
from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Optional, Set

from journal2md.builders.base import ArtifactBuilder
from journal2md.utils.fs import deduplicate_filename


class ZipArchiveBuilder(ArtifactBuilder):
    """Builds ``Journal_Export_<date>.zip``."""

    suffix = ".zip"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._zip: Optional[zipfile.ZipFile] = None
        self._names: Set[str] = set()

    def _open(self, staged: Path) -> None:
        self._zip = zipfile.ZipFile(staged, "w", compression=zipfile.ZIP_DEFLATED)

    def _write(self, name: str, content: str) -> str:
        stored = deduplicate_filename(name, self._names)
        self._zip.writestr(stored, content)
        self._names.add(stored)
        return stored

    def _close(self) -> None:
        if self._zip is not None:
            self._zip.close()
