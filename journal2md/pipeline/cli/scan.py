"""
Scan Command
------------

Inspect an export without converting anything: how many entries the index
lists, their date span, and how many fall inside a chosen range.
"""
from __future__ import annotations

import click
from datetime import datetime
from pathlib import Path
from typing import Optional

from journal2md.core.cli_options import (
    config_option,
    end_option,
    source_argument,
    start_option,
)
from journal2md.core.logging_manager import ExportLogger, handle_cli_error
from journal2md.pipeline.configs import load_config
from journal2md.pipeline.resolver import open_source
from journal2md.pipeline.session import ExportSession


def open_session(
    source: str, config: str, logger: Optional[ExportLogger]
) -> ExportSession:
    """Open the export at ``source`` and parse its index."""
    extraction_config = load_config(Path(config))
    return ExportSession.load(open_source(Path(source)), extraction_config, logger)


def as_date(value: Optional[datetime]):
    return value.date() if value is not None else None


@click.command()
@source_argument
@start_option
@end_option
@config_option
@click.option("--list", "list_entries", is_flag=True, help="List every selected entry")
@click.pass_context
def scan(
    ctx: click.Context,
    source: str,
    start: Optional[datetime],
    end: Optional[datetime],
    config: str,
    list_entries: bool,
) -> None:
    """
    Show the entries found in a journal export.

    SOURCE is the export folder or a .zip of it.
    """
    logger: ExportLogger = ctx.obj["logger"]

    try:
        session = open_session(source, config, logger)
        selection = session.select(session.range_from(as_date(start), as_date(end)))
    except Exception as e:
        handle_cli_error(ctx, e, "scan", additional_context={"source": source})
        return

    click.echo(f"📖 {session.describe()}")
    click.echo(f"Selected range contains {selection.count} entries.")

    if list_entries:
        for entry in selection.entries:
            click.echo(f"  • {entry.date.isoformat()}  {entry.title}")


__all__ = ["scan", "open_session", "as_date"]
