"""
Export Command
--------------

Convert the entries of a date range to Markdown.

Per-entry problems (missing documents, conversion errors) are counted and
reported at the end; the command only fails outright when there is
nothing to convert or the artifact cannot be written.
"""
from __future__ import annotations

import click
from datetime import datetime
from pathlib import Path
from typing import Optional

from journal2md.core.cli_options import (
    config_option,
    dry_run_option,
    end_option,
    format_option,
    output_option,
    source_argument,
    start_option,
)
from journal2md.core.logging_manager import ExportLogger, handle_cli_error
from journal2md.pipeline.cli.scan import as_date, open_session
from journal2md.pipeline.packager import ExportMode, export_entries, sort_entries
from journal2md.utils.fs import archive_filename, document_filename, entry_filename


class ProgressBarSink:
    """Feeds (label, percent) updates into a click progress bar."""

    def __init__(self, bar) -> None:
        self.bar = bar
        self.percent = 0

    def __call__(self, label: str, percent: int) -> None:
        self.bar.label = label
        if percent > self.percent:
            self.bar.update(percent - self.percent)
            self.percent = percent


@click.command()
@source_argument
@format_option
@start_option
@end_option
@output_option()
@config_option
@dry_run_option
@click.pass_context
def export(
    ctx: click.Context,
    source: str,
    export_format: str,
    start: Optional[datetime],
    end: Optional[datetime],
    output: str,
    config: str,
    dry_run: bool,
) -> None:
    """
    Convert journal entries to Markdown.

    SOURCE is the export folder or a .zip of it. Without --start/--end the
    whole journal is exported.
    """
    logger: ExportLogger = ctx.obj["logger"]
    mode = ExportMode(export_format.lower())
    context = {"source": source, "format": mode.value, "output": output}

    try:
        session = open_session(source, config, logger)
        filter_range = session.range_from(as_date(start), as_date(end))
        selection = session.select(filter_range)
    except Exception as e:
        handle_cli_error(ctx, e, "export", additional_context=context)
        return

    click.echo(f"📖 {session.describe()}")
    click.echo(f"Selected range contains {selection.count} entries.")

    if dry_run:
        click.echo("\n📝 DRY RUN - no files will be written")
        today = datetime.now().date()
        if mode is ExportMode.ARCHIVE:
            click.echo(f"Would write {Path(output) / archive_filename(today)} with:")
            for entry in sort_entries(selection.entries):
                click.echo(f"  • {entry_filename(entry.date, entry.title)}")
        else:
            click.echo(f"Would write {Path(output) / document_filename(today)} with:")
            for entry in sort_entries(selection.entries):
                click.echo(f"  • {entry}")
        return

    try:
        with click.progressbar(length=100, label="Converting") as bar:
            result = export_entries(
                session,
                filter_range,
                mode,
                Path(output),
                progress=ProgressBarSink(bar),
                logger=logger,
            )
    except Exception as e:
        handle_cli_error(ctx, e, "export", additional_context=context)
        return

    stats = result.stats
    click.echo(
        f"\n✅ Conversion complete! {stats.succeeded} of "
        f"{stats.entries_processed} entries exported."
    )
    click.echo(f"  Output: {result.artifact_path}")
    click.echo(f"  Duration: {stats.duration():.2f}s")

    if stats.errors:
        click.echo(f"\n⚠️  {stats.errors} entries failed:", err=True)
        if stats.missing_files:
            click.echo(f"  Missing files: {stats.missing_files}", err=True)
        if stats.conversion_failures:
            click.echo(f"  Conversion failures: {stats.conversion_failures}", err=True)
        for failure in result.failures:
            click.echo(f"  • {failure.entry}: {failure.reason}", err=True)


__all__ = ["export"]
