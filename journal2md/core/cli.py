#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for journal2md commands.

Functions:
    setup_logger: Initialize ExportLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    ExportStats: Per-run tally of the export packager

Usage:
    from journal2md.core.cli import setup_logger, ExportStats

    logger = setup_logger(log_dir, "export")
    stats = ExportStats()
    stats.entries_processed += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from journal2md.core.logging_manager import ExportLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(
    log_dir: Path, component_name: str, verbose: bool = False
) -> ExportLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    an ExportLogger for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'export')
        verbose: Echo INFO messages to the console as well

    Returns:
        Configured ExportLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return ExportLogger(
        operations_log_dir,
        component_name=component_name,
        console_level=logging.INFO if verbose else logging.WARNING,
    )


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Elapsed seconds since start_time (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return f"{self.errors} errors, {self.duration():.2f}s"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class ExportStats(OperationStats):
    """
    Statistics for one export run.

    Every entry of the filtered range is counted in ``entries_processed``
    whether it succeeds or fails. Each failure increments ``errors`` once,
    together with exactly one of the per-kind counters.

    Attributes:
        entries_processed: Entries attempted
        missing_files: Entries with no backing document
        conversion_failures: Entries whose read/extract/convert step raised
        cancelled: True when the run stopped before the last entry
    """
    entries_processed: int = 0
    missing_files: int = 0
    conversion_failures: int = 0
    cancelled: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.entries_processed < 0:
            raise ValueError(
                f"entries_processed must be non-negative, got {self.entries_processed}"
            )
        if self.missing_files < 0:
            raise ValueError(f"missing_files must be non-negative, got {self.missing_files}")
        if self.conversion_failures < 0:
            raise ValueError(
                f"conversion_failures must be non-negative, got {self.conversion_failures}"
            )

    @property
    def succeeded(self) -> int:
        return self.entries_processed - self.errors

    def record_missing(self) -> None:
        self.missing_files += 1
        self.errors += 1

    def record_failure(self) -> None:
        self.conversion_failures += 1
        self.errors += 1

    def summary(self) -> str:
        """Get formatted summary with entry metrics."""
        parts = [f"{self.succeeded} of {self.entries_processed} entries exported"]
        if self.missing_files:
            parts.append(f"{self.missing_files} missing files")
        if self.conversion_failures:
            parts.append(f"{self.conversion_failures} conversion failures")
        if self.cancelled:
            parts.append("cancelled")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "entries_processed": self.entries_processed,
            "succeeded": self.succeeded,
            "missing_files": self.missing_files,
            "conversion_failures": self.conversion_failures,
            "cancelled": self.cancelled,
        })
        return d
