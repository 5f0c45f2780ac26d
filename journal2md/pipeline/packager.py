#!/usr/bin/env python3
"""
packager.py
-----------
Convert a date range of journal entries and package the result.

Entries are sorted by date, then handled one at a time:

    resolve path → read document → extract + convert → add to artifact

A missing document or a failing conversion is recorded for that entry and
the loop moves on; only a failure to finalize the artifact aborts the
export. Output order (archive members, document sections) always follows
entry date, whatever order the entries were selected in.

    exports/
    ├── Journal_Export_<YYYY-MM-DD>.zip
    │   ├── 2025-12-15 - Untitled.md
    │   └── 2026-02-04 - My Day.md
    └── Journal_Full_Export_<YYYY-MM-DD>.md

Programmatic API:
    from journal2md.pipeline.packager import ExportMode, export_entries

    result = export_entries(session, session.default_range(), ExportMode.ARCHIVE, out_dir)
    print(result.stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence

# --- Local imports ---
from journal2md.builders import ArtifactBuilder, MarkdownDocumentBuilder, ZipArchiveBuilder
from journal2md.core.cli import ExportStats
from journal2md.core.exceptions import (
    EntryConversionError,
    MissingFileError,
    ValidationError,
)
from journal2md.core.logging_manager import ExportLogger, safe_logger
from journal2md.dataclasses.conversion_result import ConversionResult, FailureKind
from journal2md.dataclasses.index_entry import IndexEntry
from journal2md.pipeline.converter import HtmlToMarkdown, MarkdownRenderer
from journal2md.pipeline.date_filter import FilterRange
from journal2md.pipeline.extractor import render_entry
from journal2md.pipeline.resolver import resolve_entry
from journal2md.pipeline.session import ExportSession
from journal2md.utils.fs import archive_filename, document_filename, entry_filename


ProgressSink = Callable[[str, int], None]
CancelCheck = Callable[[], bool]


class ExportMode(str, Enum):
    """Artifact layout."""

    ARCHIVE = "zip"
    SINGLE = "single"


@dataclass
class ExportResult:
    """
    Attributes:
        artifact_path: Written artifact, None when the export was cancelled
        stats: Processed/error tally
        results: One ConversionResult per attempted entry, in date order
    """

    artifact_path: Optional[Path]
    stats: ExportStats
    results: List[ConversionResult] = field(default_factory=list)

    @property
    def failures(self) -> List[ConversionResult]:
        return [r for r in self.results if not r.ok]


def sort_entries(entries: Sequence[IndexEntry]) -> List[IndexEntry]:
    """Entries ascending by date; same-day entries keep their index order."""
    return sorted(entries, key=lambda e: e.date)


def make_builder(
    mode: ExportMode,
    today: date,
    logger: Optional[ExportLogger] = None,
    staging_dir: Optional[Path] = None,
) -> ArtifactBuilder:
    if mode is ExportMode.ARCHIVE:
        return ZipArchiveBuilder(archive_filename(today), logger=logger, staging_dir=staging_dir)
    return MarkdownDocumentBuilder(document_filename(today), logger=logger, staging_dir=staging_dir)


def convert_entry(
    session: ExportSession,
    entry: IndexEntry,
    converter: HtmlToMarkdown,
) -> ConversionResult:
    """
    Resolve, read and convert a single entry.

    Returns:
        Successful ConversionResult

    Raises:
        MissingFileError: If no document backs the entry
        EntryConversionError: If reading or converting the document fails
    """
    path = resolve_entry(session.source, entry)
    try:
        markup = session.source.read_text(path)
        markdown = render_entry(entry, markup, converter, session.config)
    except Exception as e:
        raise EntryConversionError(
            f"Failed to convert '{entry.title}' ({path}): {e}", entry
        ) from e
    return ConversionResult.success(entry, markdown, source_path=path)


def export_entries(
    session: ExportSession,
    filter_range: FilterRange,
    mode: ExportMode,
    output_dir: Path,
    converter: Optional[HtmlToMarkdown] = None,
    progress: Optional[ProgressSink] = None,
    should_cancel: Optional[CancelCheck] = None,
    today: Optional[date] = None,
    logger: Optional[ExportLogger] = None,
    staging_dir: Optional[Path] = None,
) -> ExportResult:
    """
    Export every entry of the session within ``filter_range``.

    Args:
        session: Loaded export
        filter_range: Inclusive date range to export
        mode: ARCHIVE for a zip of daily files, SINGLE for one document
        output_dir: Directory receiving the artifact
        converter: HTML to Markdown converter (markdownify by default)
        progress: Called with (label, percent) before each entry and at the end
        should_cancel: Checked before each entry; True stops the export and
            discards the partial artifact
        today: Date used in the artifact name (default: today)
        logger: Optional logger
        staging_dir: Where the artifact is staged before finalize

    Returns:
        ExportResult with the artifact path, stats and per-entry results

    Raises:
        ValidationError: If the range holds no entries
        PackagingError: If the artifact cannot be written or finalized
    """
    log = safe_logger(logger)
    converter = converter or MarkdownRenderer(heading_style=session.config.heading_style)
    today = today or date.today()
    report = progress or (lambda label, percent: None)

    entries = sort_entries(session.select(filter_range).entries)
    if not entries:
        raise ValidationError(
            f"Selected range {filter_range} contains no entries; nothing to convert"
        )

    stats = ExportStats()
    results: List[ConversionResult] = []
    total = len(entries)

    log.log_operation(
        "export_start",
        {"mode": mode.value, "range": str(filter_range), "entries": total},
    )

    with make_builder(mode, today, logger, staging_dir) as builder:
        for position, entry in enumerate(entries, start=1):
            if should_cancel is not None and should_cancel():
                stats.cancelled = True
                log.log_warning(
                    f"Export cancelled after {stats.entries_processed} of {total} entries"
                )
                break

            stats.entries_processed += 1
            report(
                f"Processing {position}/{total}: {entry.title}",
                round(position / total * 100),
            )

            try:
                result = convert_entry(session, entry, converter)
            except MissingFileError as e:
                stats.record_missing()
                log.log_warning(str(e), {"date": entry.date})
                results.append(ConversionResult.failed(entry, FailureKind.MISSING_FILE, str(e)))
                continue
            except EntryConversionError as e:
                stats.record_failure()
                log.log_error(e, {"operation": "convert_entry", "date": entry.date})
                results.append(
                    ConversionResult.failed(entry, FailureKind.CONVERSION_FAILURE, str(e))
                )
                continue

            builder.add(entry_filename(entry.date, entry.title), result.markdown)
            results.append(result)

        if stats.cancelled:
            builder.discard()
            artifact_path = None
        else:
            report("Finalizing", 100)
            artifact_path = builder.finalize(Path(output_dir))

    log.log_operation("export_complete", {"stats": stats.summary(), "artifact": artifact_path})
    return ExportResult(artifact_path=artifact_path, stats=stats, results=results)
