#!/usr/bin/env python3
"""
temporal_files.py
--------------------
Staging area for export artifacts.

Artifacts are written inside a tracked temporary directory and moved into
the output directory only once they are complete. Anything left in the
staging area is removed when the manager exits, so an aborted or cancelled
export never leaves a half-written archive next to finished ones.

Usage:
    from journal2md.core.temporal_files import TemporalFileManager

    with TemporalFileManager() as temp_manager:
        staged = temp_manager.create_temp_file(suffix=".zip")
        write_archive(staged)
        final = temp_manager.commit(staged, output_dir / "Journal_Export.zip")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from .exceptions import TemporalFileError


class TemporalFileManager:
    """
    Creates temporary files and removes them on exit.

    Usage:
        with TemporalFileManager() as temp_manager:
            temp_file = temp_manager.create_temp_file(suffix=".md")
            # ... write temp_file ...
        # Automatic cleanup on context exit
    """

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        """
        Args:
            base_dir: Base directory for temporary files. Uses system temp if None.
        """
        self.base_dir = Path(base_dir) if base_dir else Path(tempfile.gettempdir())
        self.active_files: List[Path] = []

    def create_temp_file(self, suffix: str = "", prefix: str = "journal2md_") -> Path:
        """
        Create an empty temporary file and track it for cleanup.

        Raises:
            TemporalFileError: If file creation fails
        """
        try:
            with tempfile.NamedTemporaryFile(
                suffix=suffix, prefix=prefix, dir=self.base_dir, delete=False
            ) as temp_file_obj:
                temp_path = Path(temp_file_obj.name)
        except OSError as e:
            raise TemporalFileError(f"Failed to create temporary file: {e}") from e

        self.active_files.append(temp_path)
        return temp_path

    def commit(self, temp_path: Path, destination: Path) -> Path:
        """
        Move a finished temporary file to its final location.

        The file is no longer tracked afterwards, so cleanup leaves it alone.

        Args:
            temp_path: File previously returned by create_temp_file
            destination: Final path; parent directories are created

        Returns:
            The destination path

        Raises:
            TemporalFileError: If the move fails
        """
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(temp_path), str(destination))
        except OSError as e:
            raise TemporalFileError(
                f"Failed to move {temp_path.name} to {destination}: {e}"
            ) from e

        if temp_path in self.active_files:
            self.active_files.remove(temp_path)
        return destination

    def cleanup(self) -> Dict[str, int]:
        """
        Remove all tracked temporary files.

        Returns:
            Dictionary with cleanup statistics
        """
        cleanup_stats = {"files_removed": 0, "errors": 0}

        for temp_file in self.active_files[:]:
            try:
                if temp_file.exists():
                    temp_file.unlink()
                    cleanup_stats["files_removed"] += 1
                self.active_files.remove(temp_file)
            except OSError:
                cleanup_stats["errors"] += 1

        return cleanup_stats

    def __enter__(self) -> "TemporalFileManager":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Optional[Any],
    ) -> None:
        del exc_type, exc_val, exc_tb
        self.cleanup()
