"""smapcatalog - Discover SMAP data files in a date-partitioned remote catalog.

Given a dataset id, a version and one or more dates, the library validates
that the dataset, version and date folders exist, then lists the files
available for each date. Nothing is downloaded.

Example:
    >>> from smapcatalog import find_smap
    >>> files = find_smap("SPL4SMGP", ["2015-03-31", "2015-04-01"], version=2)
    >>> files.columns.tolist()
    ['name', 'date', 'ftp_dir']
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from smapcatalog.adapters.executor import SynchronousExecutor, ThreadPoolExecutorAdapter
from smapcatalog.adapters.transport import (
    FilesystemTransport,
    FtpTransport,
    RouterTransport,
    create_router,
)
from smapcatalog.config import DEFAULT_CATALOG_ROOT, FinderConfig
from smapcatalog.core.dates import normalize_dates
from smapcatalog.core.exceptions import (
    ConfigurationError,
    DateFormatError,
    DateNotAvailableError,
    EmptyDirectoryError,
    ListingParseError,
    SmapCatalogError,
    TransportError,
    UnknownDatasetError,
    UnknownVersionError,
    UnsupportedSchemeError,
)
from smapcatalog.core.models import CatalogRow, CatalogTable, RemotePath
from smapcatalog.core.paths import dataset_date_folder, dataset_version_folder
from smapcatalog.core.ports import ExecutorPort, ListingTransport
from smapcatalog.core.services import Finder
from smapcatalog.log import configure_logging


if TYPE_CHECKING:
    from collections.abc import Iterable

    import pandas as pd

    from smapcatalog.core.dates import DateLike


logger.disable(__name__)

__version__ = "0.1.0"


def find_smap(
    id: str,  # noqa: A002
    dates: DateLike | Iterable[DateLike],
    version: int,
    *,
    config: FinderConfig | None = None,
    transport: ListingTransport | None = None,
) -> pd.DataFrame:
    """Find SMAP data files available on one or more dates.

    Args:
        id: Dataset id, e.g. "SPL4SMGP".
        dates: A date, a "YYYY-MM-DD" string, or an iterable of them.
        version: Dataset version number.
        config: Settings. Defaults to FinderConfig.from_env().
        transport: Listing backend. Defaults to the scheme router.

    Returns:
        DataFrame with columns name, date and ftp_dir, one row per logical
        file, grouped by date in input order.
    """
    if config is None:
        config = FinderConfig.from_env()
    if transport is None:
        finder = Finder.from_config(config)
    else:
        finder = Finder(transport, config=config)
    return finder.find_frame(id, dates, version)


__all__ = [
    "DEFAULT_CATALOG_ROOT",
    "CatalogRow",
    "CatalogTable",
    "ConfigurationError",
    "DateFormatError",
    "DateNotAvailableError",
    "EmptyDirectoryError",
    "ExecutorPort",
    "FilesystemTransport",
    "Finder",
    "FinderConfig",
    "FtpTransport",
    "ListingParseError",
    "ListingTransport",
    "RemotePath",
    "RouterTransport",
    "SmapCatalogError",
    "SynchronousExecutor",
    "ThreadPoolExecutorAdapter",
    "TransportError",
    "UnknownDatasetError",
    "UnknownVersionError",
    "UnsupportedSchemeError",
    "__version__",
    "configure_logging",
    "create_router",
    "dataset_date_folder",
    "dataset_version_folder",
    "find_smap",
    "normalize_dates",
]
