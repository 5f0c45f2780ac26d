#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click options shared by the journal2md commands.

Usage:
    from journal2md.core.cli_options import source_argument, start_option, end_option

    @cli.command()
    @source_argument
    @start_option
    @end_option
    def scan(source, start, end):
        pass
"""
import click

from journal2md.core.paths import CONFIG_PATH, LOG_DIR, OUTPUT_DIR


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose logging with detailed output"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files"
)


# ═══════════════════════════════════════════════════════════════════════════
# SOURCE / OUTPUT
# ═══════════════════════════════════════════════════════════════════════════

source_argument = click.argument(
    "source",
    type=click.Path(exists=True),
)

config_option = click.option(
    "-c", "--config",
    type=click.Path(),
    default=str(CONFIG_PATH),
    show_default=True,
    help="YAML file overriding extraction settings (ignored if missing)"
)

dry_run_option = click.option(
    "--dry-run",
    is_flag=True,
    help="Preview the selection without writing any artifact"
)


def output_option(default=OUTPUT_DIR, help_text="Directory for the exported artifact"):
    """
    Factory function for output directory option.

    The directory need not exist yet; it is created on export.
    """
    return click.option(
        "-o", "--output",
        type=click.Path(file_okay=False),
        default=str(default),
        show_default=True,
        help=help_text
    )


# ═══════════════════════════════════════════════════════════════════════════
# DATE RANGE OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

def date_option(name: str, help_text: str):
    """
    Factory function for YYYY-MM-DD date options.

    Values arrive as datetime objects; commands call ``.date()`` on them.
    """
    return click.option(
        name,
        type=click.DateTime(formats=["%Y-%m-%d"]),
        default=None,
        help=help_text
    )


start_option = date_option(
    "--start", "First day of the range, inclusive (default: earliest entry)"
)

end_option = date_option(
    "--end", "Last day of the range, inclusive (default: latest entry)"
)


# ═══════════════════════════════════════════════════════════════════════════
# OUTPUT FORMAT OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

format_option = click.option(
    "--format", "export_format",
    type=click.Choice(["zip", "single"], case_sensitive=False),
    default="zip",
    show_default=True,
    help="zip: one Markdown file per entry; single: one concatenated document"
)
