"""CLI commands for smapcatalog."""

from __future__ import annotations

import typer

from smapcatalog.core.exceptions import SmapCatalogError


app = typer.Typer(
    name="smapcatalog",
    help="Discover SMAP data files available in a remote catalog.",
    no_args_is_help=True,
)


def _fail(error: SmapCatalogError) -> typer.Exit:
    """Print an error with its recovery hint and return the exit to raise."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    return typer.Exit(1)


@app.command()
def find(
    dataset_id: str = typer.Argument(..., help="Dataset id, e.g. SPL4SMGP."),
    dates: list[str] = typer.Argument(
        ..., help="One or more dates formatted as YYYY-MM-DD."
    ),
    version: int = typer.Option(
        ..., "--version", "-v", min=1, help="Dataset version number."
    ),
    root: str | None = typer.Option(
        None,
        "--root",
        "-r",
        help="Catalog root (ftp://..., file://... or a local path). "
        "Overrides SMAPCATALOG_ROOT.",
    ),
    workers: int | None = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Number of dates to process in parallel.",
    ),
    csv: bool = typer.Option(
        False,
        "--csv",
        help="Print CSV instead of a table.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log each listing fetch to stderr.",
    ),
) -> None:
    """List the files available for a dataset on the given dates."""
    from dataclasses import replace

    from smapcatalog.cli.formatting import print_table
    from smapcatalog.config import FinderConfig
    from smapcatalog.core.services import Finder
    from smapcatalog.log import configure_logging

    if verbose:
        configure_logging("DEBUG")

    try:
        config = FinderConfig.from_env()
        if root:
            config = config.with_root(root)
        if workers:
            config = replace(config, max_workers=workers)
        table = Finder.from_config(config).find(dataset_id, dates, version)
    except SmapCatalogError as e:
        raise _fail(e) from None

    if csv:
        typer.echo(table.to_dataframe().to_csv(index=False), nl=False)
        return

    if not len(table):
        typer.echo("No files found.")
        return

    print_table(table)


@app.command()
def root() -> None:
    """Print the catalog root in effect."""
    from smapcatalog.config import FinderConfig

    try:
        config = FinderConfig.from_env()
    except SmapCatalogError as e:
        raise _fail(e) from None
    typer.echo(config.catalog_root)


def main() -> None:
    """Entry point for the CLI."""
    app()
