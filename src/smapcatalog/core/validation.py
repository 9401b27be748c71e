"""Validation chain run before any file discovery.

Three ordered checks, each fetching its own listing:

1. the dataset id appears (version suffix stripped) at the catalog root;
2. the exact versioned folder appears at the catalog root;
3. the date folder appears in the versioned folder.

The catalog root is listed once per check; nothing is cached between checks
or between dates.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from loguru import logger

from smapcatalog.core.exceptions import (
    DateNotAvailableError,
    UnknownDatasetError,
    UnknownVersionError,
)
from smapcatalog.core.listing import folder_names
from smapcatalog.core.paths import dataset_version_folder, strip_version
from smapcatalog.core.remote import read_listing


if TYPE_CHECKING:
    from datetime import date

    from smapcatalog.core.models import RemotePath
    from smapcatalog.core.ports import ListingTransport


def validate_dataset_id(
    transport: ListingTransport, root: str, dataset_id: str
) -> None:
    """Check that dataset_id has at least one folder at the catalog root.

    Raises:
        UnknownDatasetError: If no root folder starts with '<dataset_id>.'
            or equals dataset_id.
    """
    names = read_listing(transport, root, partial(folder_names, route=root))
    available = list(dict.fromkeys(strip_version(name) for name in names))
    if dataset_id not in available:
        raise UnknownDatasetError(dataset_id, root=root, available=available)
    logger.debug("Dataset {} exists at {}", dataset_id, root)


def validate_version(
    transport: ListingTransport, root: str, dataset_id: str, version: int
) -> None:
    """Check that the exact '<dataset_id>.<version:03d>' folder exists.

    Raises:
        UnknownVersionError: If the versioned folder is absent.
    """
    expected = dataset_version_folder(dataset_id, version)
    names = read_listing(transport, root, partial(folder_names, route=root))
    if expected not in names:
        raise UnknownVersionError(
            dataset_id, version=version, expected_folder=expected, root=root
        )
    logger.debug("Version folder {} exists at {}", expected, root)


def validate_date(
    transport: ListingTransport,
    path: RemotePath,
    dataset_id: str,
    version: int,
    day: date,
) -> None:
    """Check that the date folder exists in the versioned folder.

    Raises:
        DateNotAvailableError: If the date folder is absent.
    """
    route = path.version_route
    names = read_listing(transport, route, partial(folder_names, route=route))
    if path.date_folder not in names:
        raise DateNotAvailableError(dataset_id, version=version, date=day, route=route)
    logger.debug("Date folder {} exists at {}", path.date_folder, route)


def validate_request(
    transport: ListingTransport,
    path: RemotePath,
    dataset_id: str,
    version: int,
    day: date,
    *,
    check_catalog: bool = True,
) -> None:
    """Run the validation chain for one date.

    Args:
        transport: Listing backend.
        path: RemotePath for the requested dataset, version and date.
        dataset_id: Requested dataset id.
        version: Requested version number.
        day: Requested date.
        check_catalog: Run the dataset and version checks. Pass False when
            they already passed earlier in the same call.

    Raises:
        UnknownDatasetError, UnknownVersionError, DateNotAvailableError,
        ListingParseError, TransportError: The first failing check.
    """
    if check_catalog:
        validate_catalog(transport, path.catalog_root, dataset_id, version)
    validate_date(transport, path, dataset_id, version, day)


def validate_catalog(
    transport: ListingTransport, root: str, dataset_id: str, version: int
) -> None:
    """Run the two catalog-root checks (dataset, then version)."""
    validate_dataset_id(transport, root, dataset_id)
    validate_version(transport, root, dataset_id, version)
