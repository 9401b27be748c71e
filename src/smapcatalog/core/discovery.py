"""File discovery inside a validated date folder."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from smapcatalog.core.listing import discover_names
from smapcatalog.core.models import CatalogRow
from smapcatalog.core.remote import read_listing


if TYPE_CHECKING:
    from datetime import date

    from smapcatalog.core.models import RemotePath
    from smapcatalog.core.ports import ListingTransport


def discover_files(
    transport: ListingTransport, path: RemotePath, prefix: str
) -> list[str]:
    """List the logical product names in a date folder.

    Files that differ only by extension (data payload and its metadata
    sidecars) collapse into one name.

    Args:
        transport: Listing backend.
        path: Validated RemotePath.
        prefix: Product name prefix used to locate the name column.

    Returns:
        Logical names in first-seen listing order.

    Raises:
        EmptyDirectoryError: If the date folder listing is 'total 0'.
        ListingParseError: If the name column can't be located.
    """
    route = path.data_route
    return read_listing(
        transport, route, partial(discover_names, route=route, prefix=prefix)
    )


def bundle_rows(names: list[str], path: RemotePath, day: date) -> list[CatalogRow]:
    """Build one CatalogRow per logical name for a date."""
    return [
        CatalogRow(name=name, date=day, ftp_dir=path.relative_dir) for name in names
    ]
