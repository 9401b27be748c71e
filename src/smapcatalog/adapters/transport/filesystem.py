"""Filesystem listing transport for local mirrors and fixture catalogs."""

from __future__ import annotations

import stat
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from smapcatalog.core.exceptions import TransportError


if TYPE_CHECKING:
    from collections.abc import Iterator


_BLOCK_SIZE = 1024


def format_entry(path: Path) -> str:
    """Render one directory entry as a long-format listing line.

    Owner and group are always 'ftp', the way anonymous FTP servers show
    them, so output doesn't depend on the local user database.
    """
    st = path.lstat()
    modified = datetime.fromtimestamp(st.st_mtime, tz=UTC)
    return (
        f"{stat.filemode(st.st_mode)} {st.st_nlink:>3} ftp ftp "
        f"{st.st_size:>12} {modified:%b %d  %Y} {path.name}"
    )


def render_listing(directory: Path) -> list[str]:
    """Render a directory as ``ls -l`` style lines with a 'total N' header.

    An empty directory renders as the single line 'total 0'.
    """
    entries = sorted(directory.iterdir(), key=lambda p: p.name)
    if not entries:
        return ["total 0"]
    # ceil(size / 1024) per entry, at least one block each
    blocks = sum(max(1, -(-p.lstat().st_size // _BLOCK_SIZE)) for p in entries)
    return [f"total {blocks}", *(format_entry(p) for p in entries)]


class FilesystemTransport:
    """Listing transport for local directories.

    Implements ListingTransport by rendering a long-format listing of a local
    directory. Useful for offline mirrors of the catalog and for testing
    without network access.
    """

    @contextmanager
    def open(self, route: str) -> Iterator[Iterator[str]]:
        """Yield the listing lines of a local directory.

        Args:
            route: Directory path, with or without a trailing slash.

        Raises:
            TransportError: If the directory doesn't exist or can't be read.
        """
        directory = Path(route)
        try:
            lines = render_listing(directory)
        except OSError as e:
            raise TransportError(
                f"Cannot list directory: {route}",
                route=route,
                cause=e,
            ) from e
        yield iter(lines)
