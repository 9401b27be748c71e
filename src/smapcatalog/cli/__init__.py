"""CLI for smapcatalog."""

from smapcatalog.cli.main import app, main


__all__ = ["app", "main"]
