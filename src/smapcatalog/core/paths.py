"""Remote path construction for the catalog folder hierarchy.

The catalog is laid out as::

    <root>/<id>.<version:03d>/<YYYY.MM.DD>/<files>
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from smapcatalog.core.dates import folder_name
from smapcatalog.core.models import RemotePath


if TYPE_CHECKING:
    from datetime import date


def normalize_root(root: str) -> str:
    """Return the catalog root with exactly one trailing slash."""
    return root.rstrip("/") + "/"


def dataset_version_folder(dataset_id: str, version: int) -> str:
    """Name of the versioned dataset folder, e.g. SPL4SMGP.002."""
    return f"{dataset_id}.{version:03d}"


def strip_version(folder: str) -> str:
    """Drop everything from the first '.' (SPL4SMGP.002 -> SPL4SMGP)."""
    return folder.split(".", 1)[0]


def dataset_date_folder(
    root: str, dataset_id: str, day: date, version: int
) -> RemotePath:
    """Build the full RemotePath for one dataset, version and date."""
    return RemotePath(
        catalog_root=normalize_root(root),
        dataset_folder=dataset_version_folder(dataset_id, version),
        date_folder=folder_name(day),
    )
