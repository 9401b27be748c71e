"""Core domain services for smapcatalog."""

from __future__ import annotations

from collections.abc import Iterable
from functools import partial
from typing import TYPE_CHECKING

from loguru import logger

from smapcatalog.config import FinderConfig
from smapcatalog.core.dates import DateLike, normalize_dates
from smapcatalog.core.discovery import bundle_rows, discover_files
from smapcatalog.core.models import CatalogRow, CatalogTable
from smapcatalog.core.paths import dataset_date_folder
from smapcatalog.core.validation import validate_catalog, validate_request


if TYPE_CHECKING:
    from datetime import date

    import pandas as pd

    from smapcatalog.core.ports import ExecutorPort, ListingTransport


class Finder:
    """Finds the files available in a date-partitioned remote catalog."""

    def __init__(
        self,
        transport: ListingTransport,
        config: FinderConfig | None = None,
        executor: ExecutorPort | None = None,
    ) -> None:
        self._transport = transport
        self._config = config if config is not None else FinderConfig()
        self._executor = executor

    @classmethod
    def from_config(cls, config: FinderConfig | None = None) -> Finder:
        """Create a Finder with the default router transport.

        Args:
            config: Settings to use. Defaults to FinderConfig.from_env().

        Returns:
            Finder routing ftp:// roots to FtpTransport and file:// or plain
            paths to FilesystemTransport.
        """
        from smapcatalog.adapters.transport import create_router

        if config is None:
            config = FinderConfig.from_env()

        return cls(transport=create_router(timeout=config.timeout), config=config)

    @property
    def config(self) -> FinderConfig:
        """Settings in use."""
        return self._config

    def find_for_date(
        self,
        dataset_id: str,
        day: date,
        version: int,
        *,
        check_catalog: bool = True,
    ) -> list[CatalogRow]:
        """Validate and discover the files of one date.

        Args:
            dataset_id: Dataset id, e.g. "SPL4SMGP".
            day: The date to search.
            version: Dataset version number.
            check_catalog: Run the dataset and version checks too.

        Returns:
            Rows for the date, in listing order.

        Raises:
            UnknownDatasetError, UnknownVersionError, DateNotAvailableError,
            EmptyDirectoryError, ListingParseError, TransportError.
        """
        path = dataset_date_folder(
            self._config.catalog_root, dataset_id, day, version
        )
        validate_request(
            self._transport,
            path,
            dataset_id,
            version,
            day,
            check_catalog=check_catalog,
        )
        names = discover_files(self._transport, path, self._config.name_prefix)
        rows = bundle_rows(names, path, day)
        logger.info("Found {} files for {} on {}", len(rows), path.dataset_folder, day)
        return rows

    def find(
        self,
        dataset_id: str,
        dates: DateLike | Iterable[DateLike],
        version: int,
    ) -> CatalogTable:
        """Find the files available for a dataset on one or more dates.

        Every date runs the full validation chain and file discovery. The
        first failure aborts the whole call; no partial table is returned.

        Dates are processed sequentially unless an executor was injected or
        config.max_workers > 1. Then they run on the injected executor, or on
        a thread pool created for this call. Rows keep the input date order
        either way.

        Args:
            dataset_id: Dataset id, e.g. "SPL4SMGP".
            dates: A date, a "YYYY-MM-DD" string, or an iterable of them.
            version: Dataset version number (positive integer).

        Returns:
            CatalogTable with rows grouped by date in input order.

        Raises:
            DateFormatError: If a date can't be parsed.
            ValueError: If version is not a positive integer.
            UnknownDatasetError, UnknownVersionError, DateNotAvailableError,
            EmptyDirectoryError, ListingParseError, TransportError.
        """
        _check_version(version)
        days = normalize_dates(dates)

        revalidate = self._config.revalidate_per_date
        if not revalidate:
            validate_catalog(
                self._transport, self._config.catalog_root, dataset_id, version
            )

        lookup = partial(
            self.find_for_date, dataset_id, version=version, check_catalog=revalidate
        )

        # Sequential unless there is an executor or more than one worker
        parallel = self._executor is not None or self._config.max_workers > 1
        if not parallel or len(days) == 1:
            return CatalogTable.concat(lookup(day) for day in days)

        if self._executor is not None:
            parts = self._executor.run_dates(lookup, days)
        else:
            from smapcatalog.adapters.executor import ThreadPoolExecutorAdapter

            with ThreadPoolExecutorAdapter(self._config.max_workers) as executor:
                parts = executor.run_dates(lookup, days)

        return CatalogTable.concat(parts)

    def find_frame(
        self,
        dataset_id: str,
        dates: DateLike | Iterable[DateLike],
        version: int,
    ) -> pd.DataFrame:
        """Like find(), returned as a DataFrame with name, date, ftp_dir."""
        return self.find(dataset_id, dates, version).to_dataframe()


def _check_version(version: int) -> None:
    if isinstance(version, bool) or not isinstance(version, int) or version < 1:
        raise ValueError(f"version must be a positive integer, got {version!r}")
