"""Parsing of long-format directory listings.

A listing looks like ``ls -l`` output::

    total 8
    drwxr-xr-x  2 ftp ftp 4096 Mar 31  2015 SPL4SMGP.002
    -rw-r--r--  1 ftp ftp  512 Mar 31  2015 SMAP_L4_SM_gph_20150331T013000_Vv2030_001.h5

Two strategies are kept apart on purpose. Folder names in the catalog root
and version folders are always the 9th column. File names in a date folder
are located by content: the column whose first-row value starts with the
product prefix, since permission strings vary in how many columns they take.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from smapcatalog.core.exceptions import EmptyDirectoryError, ListingParseError


if TYPE_CHECKING:
    from collections.abc import Iterable


EMPTY_SENTINEL = "total 0"
NAME_COLUMN = 8  # 9th whitespace-delimited column


def is_empty_sentinel(lines: list[str]) -> bool:
    """Whether a listing is exactly the empty-directory sentinel ('total 0')."""
    content = [line.strip() for line in lines if line.strip()]
    return content == [EMPTY_SENTINEL]


def entry_rows(lines: Iterable[str]) -> list[list[str]]:
    """Split listing lines into columns, skipping the summary line and blanks."""
    rows = [line.split() for line in lines if line.strip()]
    if rows and rows[0][0] == "total":
        rows = rows[1:]
    return rows


def folder_names(lines: Iterable[str], route: str) -> list[str]:
    """Extract entry names from a folder listing using the fixed 9th column.

    Args:
        lines: Raw listing lines.
        route: The listed route, for error context.

    Returns:
        Entry names in listing order.

    Raises:
        ListingParseError: If a row has fewer than nine columns.
    """
    names = []
    for row in entry_rows(lines):
        if len(row) <= NAME_COLUMN:
            raise ListingParseError(
                f"Expected at least {NAME_COLUMN + 1} columns in listing of {route}",
                route=route,
                line=" ".join(row),
            )
        names.append(row[NAME_COLUMN])
    return names


def find_name_column(row: list[str], prefix: str) -> int | None:
    """Index of the first column starting with prefix, or None."""
    for index, value in enumerate(row):
        if value.startswith(prefix):
            return index
    return None


def file_names(lines: Iterable[str], route: str, prefix: str) -> list[str]:
    """Extract file names from a date-folder listing.

    The name column is the first column of the first row whose value starts
    with prefix; that column index is then used for every row.

    Args:
        lines: Raw listing lines.
        route: The listed route, for error context.
        prefix: Product name prefix, e.g. "SMAP".

    Returns:
        File names in listing order. Empty if the listing has no entry rows.

    Raises:
        ListingParseError: If no column of the first row matches prefix, or a
            later row is too short to have the name column.
    """
    rows = entry_rows(lines)
    if not rows:
        return []

    column = find_name_column(rows[0], prefix)
    if column is None:
        raise ListingParseError(
            f"No column starting with '{prefix}' in listing of {route}",
            route=route,
            line=" ".join(rows[0]),
        )

    names = []
    for row in rows:
        if len(row) <= column:
            raise ListingParseError(
                f"Listing row of {route} has no column {column + 1}",
                route=route,
                line=" ".join(row),
            )
        names.append(row[column])
    return names


def strip_extension(filename: str) -> str:
    """Drop everything from the first '.' of a filename."""
    return filename.split(".", 1)[0]


def logical_names(filenames: Iterable[str]) -> list[str]:
    """Strip extensions and deduplicate, keeping first-seen order.

    Hidden files (a leading '.') have no stem and are skipped.

    Example:
        >>> logical_names(["a.h5", "a.h5.iso.xml", "b.h5"])
        ['a', 'b']
    """
    stems = (strip_extension(name) for name in filenames)
    return list(dict.fromkeys(stem for stem in stems if stem))


def discover_names(lines: list[str], route: str, prefix: str) -> list[str]:
    """Logical product names in a date-folder listing.

    Raises:
        EmptyDirectoryError: If the listing is the 'total 0' sentinel.
        ListingParseError: If the name column can't be located.
    """
    if is_empty_sentinel(lines):
        raise EmptyDirectoryError(route)
    return logical_names(file_names(lines, route, prefix))
