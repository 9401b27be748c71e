"""Allow running the CLI with ``python -m smapcatalog``."""

from smapcatalog.cli import main


if __name__ == "__main__":
    main()
