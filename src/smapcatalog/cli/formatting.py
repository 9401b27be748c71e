"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table


if TYPE_CHECKING:
    from smapcatalog.core.models import CatalogTable


def build_table(table: CatalogTable) -> Table:
    """Build a Rich table with one row per discovered file."""
    rich_table = Table()
    rich_table.add_column("Name")
    rich_table.add_column("Date")
    rich_table.add_column("FTP dir")
    for row in table:
        rich_table.add_row(row.name, row.date.isoformat(), row.ftp_dir)
    return rich_table


def print_table(table: CatalogTable) -> None:
    """Print a CatalogTable as a Rich table."""
    # Force terminal output to ensure tables render correctly in all environments
    console = Console(force_terminal=True, width=200)
    console.print(build_table(table))
