#!/usr/bin/env python3
"""
base.py
-------------------
Base class for export artifact builders.

A builder receives converted entries one at a time through ``add`` and
writes them to a staged temporary file. ``finalize`` moves the finished
file into the output directory; ``discard`` throws the staged file away.
Until finalize succeeds nothing appears in the output directory.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional

from journal2md.core.exceptions import PackagingError, TemporalFileError
from journal2md.core.logging_manager import ExportLogger, safe_logger
from journal2md.core.temporal_files import TemporalFileManager


class ArtifactBuilder(ABC):
    """
    Abstract base class for artifact builders.

    Attributes:
        filename: Name of the finished artifact
        members: Names under which entries were added, in order
        logger: Optional logger for operation tracking
    """

    suffix = ""

    def __init__(
        self,
        filename: str,
        logger: Optional[ExportLogger] = None,
        staging_dir: Optional[Path] = None,
    ) -> None:
        self.filename = filename
        self.logger = logger
        self.members: List[str] = []
        self._temp = TemporalFileManager(staging_dir)
        self._staged: Optional[Path] = None
        self._closed = False

    @property
    def member_count(self) -> int:
        return len(self.members)

    # ----- Subclass hooks -----
    @abstractmethod
    def _open(self, staged: Path) -> None:
        """Prepare the staged file for writing."""

    @abstractmethod
    def _write(self, name: str, content: str) -> str:
        """Write one member and return the name it was stored under."""

    @abstractmethod
    def _close(self) -> None:
        """Flush and close the staged file."""

    # ----- Public API -----
    def add(self, name: str, content: str) -> str:
        """
        Append one converted entry.

        Args:
            name: Member name (ignored by single-document builders)
            content: Entry Markdown

        Returns:
            Name the entry was stored under

        Raises:
            PackagingError: If the staged file cannot be written
        """
        if self._closed:
            raise PackagingError(f"{self.filename} is already finalized")
        try:
            self._ensure_staged()
            stored = self._write(name, content)
        except (OSError, TemporalFileError) as e:
            raise PackagingError(f"Cannot write to {self.filename}: {e}") from e

        self.members.append(stored)
        return stored

    def finalize(self, output_dir: Path) -> Path:
        """
        Close the artifact and move it into ``output_dir``.

        Returns:
            Final artifact path

        Raises:
            PackagingError: If closing or moving the artifact fails
        """
        try:
            self._ensure_staged()
            self._close()
            self._closed = True
            final_path = self._temp.commit(self._staged, Path(output_dir) / self.filename)
        except (OSError, TemporalFileError) as e:
            self.discard()
            raise PackagingError(f"Cannot finalize {self.filename}: {e}") from e

        self._temp.cleanup()
        safe_logger(self.logger).log_operation(
            "artifact_finalized",
            {"path": str(final_path), "members": self.member_count},
        )
        return final_path

    def discard(self) -> None:
        """Drop the staged artifact; the output directory is left untouched."""
        if self._staged is not None and not self._closed:
            try:
                self._close()
            except OSError as e:
                safe_logger(self.logger).log_warning(
                    f"Error closing discarded {self.filename}: {e}"
                )
        self._closed = True
        self._temp.cleanup()
        safe_logger(self.logger).log_debug(f"Discarded staged {self.filename}")

    def _ensure_staged(self) -> None:
        if self._staged is None:
            self._staged = self._temp.create_temp_file(suffix=self.suffix)
            self._open(self._staged)

    def __enter__(self) -> "ArtifactBuilder":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        del exc_val, exc_tb
        if exc_type is not None or not self._closed:
            self.discard()
