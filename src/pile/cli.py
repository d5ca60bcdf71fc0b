"""CLI interface for Pile."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from pile.chart import draw
from pile.core.filters import AgeFilter
from pile.core.scanner import ScanError, scan
from pile.core.session import DeletionSession
from pile.settings import Settings
from pile.utils import format_size


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _confirm_deletion(path: Path) -> bool:
    """Ask before deleting *path*. Errors from the delete propagate as OSError."""
    if not click.confirm(f"Delete file {path}?", default=False):
        click.echo()
        return False
    path.unlink()
    click.echo("File deleted\n")
    return True


def _on_message(level: str, message: str) -> None:
    if level == "error":
        click.echo(f"{click.style(message, fg='red')}\n", err=True)
    else:
        click.echo(f"\n{message}\n")


def _read_command(page_size: int) -> str:
    click.echo(
        f"\nTop {page_size} filesizes are shown above. Enter a number to delete, "
        f"type n to show the next {page_size} files or q to quit."
    )
    return click.prompt("Input", default="", show_default=False, prompt_suffix=": ")


@click.command()
@click.argument("directory", type=click.Path(path_type=Path))
@click.option("-c", "--min-created", type=click.IntRange(min=0), default=None, metavar="DAYS",
              help="Creation date must be at least DAYS in the past "
                   "(inode change time where the platform has no birth time, e.g. Linux)")
@click.option("-m", "--min-modified", type=click.IntRange(min=0), default=None, metavar="DAYS",
              help="Last modification date must be at least DAYS in the past")
@click.option("-a", "--min-accessed", type=click.IntRange(min=0), default=None, metavar="DAYS",
              help="Last access date must be at least DAYS in the past")
@click.option("--page-size", type=click.IntRange(min=1), default=None, metavar="N",
              help="Number of files shown per page")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.version_option(package_name="pile", prog_name="pile")
def main(
    directory: Path,
    min_created: int | None,
    min_modified: int | None,
    min_accessed: int | None,
    page_size: int | None,
    verbose: int,
) -> None:
    """Find the largest old files in DIRECTORY and delete them interactively."""
    _setup_logging(verbose)
    settings = Settings.instance()

    if min_created is None:
        min_created = settings.get_int("filters.min_created_days")
    if min_modified is None:
        min_modified = settings.get_int("filters.min_modified_days")
    if min_accessed is None:
        min_accessed = settings.get_int("filters.min_accessed_days")
    if page_size is None:
        page_size = settings.get_int("session.page_size", minimum=1)

    click.echo(f"\nSearching for files in {directory} ...\n")
    age_filter = AgeFilter.from_days(min_created, min_modified, min_accessed)
    for name, days in age_filter.active.items():
        click.echo(f"Only showing files that were {name} at least {days} days ago.")

    try:
        result = scan(directory, age_filter.min_created, age_filter.min_modified, age_filter.min_accessed)
    except ScanError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"\nTotal size: {click.style(format_size(result.total_bytes), fg='green', bold=True)}\n")

    session = DeletionSession(result, _confirm_deletion, page_size=page_size, on_message=_on_message)
    session.run(lambda: _read_command(page_size), draw)

    if session.files_removed:
        click.echo(
            f"Freed {click.style(format_size(session.freed_bytes), fg='green', bold=True)} "
            f"({session.files_removed:,} files removed)\n"
        )
