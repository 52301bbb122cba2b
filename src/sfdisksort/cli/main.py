"""
sfdisksort CLI Main Entry Point.

Reads an `sfdisk -d` dump on stdin and writes the dump sorted by start
sector on stdout:

    sfdisk -d /dev/sdb | sfdisk-sort > sdb.sorted
    sfdisk /dev/sdb < sdb.sorted
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
import humanize
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sfdisksort import __version__
from sfdisksort.core.config import SorterConfig, load_config
from sfdisksort.core.errors import DumpError
from sfdisksort.core.logging import setup_logging
from sfdisksort.core.models import SortResult
from sfdisksort.dump.devices import block_device_kind, parse_device_name
from sfdisksort.dump.pipeline import sort_dump

# stdout carries the dump; everything for humans goes to stderr
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    err_console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)


def format_size(sectors: int | None, sector_size: int, unit: str) -> str:
    """Human readable partition size, when the dump counts in sectors."""
    if sectors is None:
        return ""
    if unit != "sectors":
        return str(sectors)
    return humanize.naturalsize(sectors * sector_size, binary=True)


def print_summary(result: SortResult) -> None:
    """Show how each partition was moved and renamed."""
    table = result.table
    title = "Partition Order"
    if table.partitions:
        name = parse_device_name(table.partitions[0].label)
        if name is not None:
            title = f"Partition Order on {name.base} ({block_device_kind(name.base).name})"

    summary = Table(title=title)
    summary.add_column("#", style="dim")
    summary.add_column("Old", style="yellow")
    summary.add_column("New", style="cyan")
    summary.add_column("Start", style="white", justify="right")
    summary.add_column("Size", style="green", justify="right")
    summary.add_column("Type", style="magenta")

    unit = table.headers.get("unit", "sectors")
    for ordinal, record in enumerate(table.partitions, start=1):
        summary.add_row(
            str(ordinal),
            record.original_label or "",
            record.label,
            str(record.start),
            format_size(record.size, table.sector_size, unit),
            record.type or "",
        )

    err_console.print(summary)
    if not result.changed:
        err_console.print("[green]Partitions are already in start order[/green]")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="sfdisk-sort")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Abort on lines that are not headers, comments or valid partition entries",
)
@click.option(
    "--field-width",
    type=click.IntRange(0, 32),
    default=None,
    help="Column width of start= and size= values (0 for no padding)",
)
@click.option("--summary", is_flag=True, help="Print the old and new order to stderr")
@click.option(
    "--check",
    is_flag=True,
    help="Only report whether the table is already sorted (exit 1 if not)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level for stderr diagnostics",
)
def cli(
    config: Path | None,
    strict: bool | None,
    field_width: int | None,
    summary: bool,
    check: bool,
    log_level: str | None,
) -> None:
    """
    Sort an sfdisk dump by partition start sector.

    Reads `sfdisk -d` output on stdin, reorders the partition entries by
    start sector, renumbers the device names to match, and writes the
    result on stdout in a form sfdisk accepts.
    """
    settings: SorterConfig = SorterConfig.load(config) if config else load_config()

    if strict is not None:
        settings.parsing.strict = strict
    if field_width is not None:
        settings.output.field_width = field_width
    if log_level is not None:
        settings.logging.level = log_level.upper()

    setup_logging(settings.logging)

    text = click.get_text_stream("stdin").read()

    try:
        result = sort_dump(text, settings)
    except DumpError as e:
        print_error(str(e))
        sys.exit(1)

    if summary:
        print_summary(result)

    if check:
        if result.changed:
            err_console.print("[yellow]Partition table is not in start order[/yellow]")
            sys.exit(1)
        err_console.print("[green]Partition table is in start order[/green]")
        return

    click.echo(result.text, nl=False)


def main() -> None:
    """Main entry point."""
    # In standalone mode click would turn an interrupt into exit 1;
    # without it, Abort and usage errors reach this handler.
    try:
        exit_code = cli(standalone_mode=False)
    except (click.exceptions.Abort, KeyboardInterrupt):
        err_console.print("\n[yellow]Operation cancelled[/yellow]")
        sys.exit(130)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except Exception as e:
        print_error(str(e))
        sys.exit(1)

    # --help and --version return their exit code here
    if isinstance(exit_code, int):
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
