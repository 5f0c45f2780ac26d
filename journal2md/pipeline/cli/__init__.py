#!/usr/bin/env python3
"""
journal2md CLI
--------------

Command-line interface for converting a journal export to Markdown.

Commands:
    - scan: Show the entries found in an export and how many a range selects
    - export: Convert a date range to a .zip of daily files or one document

Usage:
    # What is in the export?
    journal2md scan ~/Downloads/Journal

    # Everything, one file per entry
    journal2md export ~/Downloads/Journal

    # December only, as one document
    journal2md export ~/Downloads/Journal.zip --format single \\
        --start 2025-12-01 --end 2025-12-31 -o ~/Desktop
"""
from __future__ import annotations

import click
from pathlib import Path

from journal2md.core.cli import setup_logger
from journal2md.core.cli_options import log_dir_option, verbose_option


@click.group()
@log_dir_option
@verbose_option
@click.version_option(package_name="journal2md")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """journal2md - Convert a journal export to Markdown"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "journal2md", verbose=verbose)


# Import and register commands from submodules
from .scan import scan
from .export import export

cli.add_command(scan)
cli.add_command(export)


if __name__ == "__main__":
    cli(obj={})
