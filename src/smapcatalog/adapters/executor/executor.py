"""Executors that run the per-date lookups of a find() call."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from loguru import logger


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from datetime import date

    from smapcatalog.core.models import CatalogRow


class SynchronousExecutor:
    """Runs dates one after another in the caller's thread.

    The first failing date stops the run, so later dates are never listed.
    Useful for tests and debugging.
    """

    def run_dates(
        self,
        lookup: Callable[[date], list[CatalogRow]],
        days: Sequence[date],
    ) -> list[list[CatalogRow]]:
        """Look up each date in turn and return the rows per date."""
        return [lookup(day) for day in days]

    def __enter__(self) -> SynchronousExecutor:
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        return None


class ThreadPoolExecutorAdapter:
    """Runs dates on a thread pool.

    Listing fetches block on network reads, so threads overlap the waits
    between dates. Results are collected by input index. Once a date fails,
    dates still waiting for a worker are cancelled; dates already being
    listed run to completion and their results are discarded.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        """Initialize the thread pool.

        Args:
            max_workers: Number of dates listed at once. None uses the
                ThreadPoolExecutor default.
        """
        self._pool = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="smapcatalog-date"
        )

    def run_dates(
        self,
        lookup: Callable[[date], list[CatalogRow]],
        days: Sequence[date],
    ) -> list[list[CatalogRow]]:
        """Look up all dates concurrently and return the rows per date.

        Args:
            lookup: Validates and lists one date.
            days: Dates in the order the rows should come back.

        Returns:
            One list of rows per date, in the order of days.

        Raises:
            The error of the earliest failing date in the order of days.
        """
        futures = [self._pool.submit(lookup, day) for day in days]
        results: list[list[CatalogRow]] = []
        for index, future in enumerate(futures):
            try:
                results.append(future.result())
            except Exception:
                pending = futures[index + 1 :]
                cancelled = sum(1 for f in pending if f.cancel())
                logger.debug(
                    "Lookup for {} failed, cancelled {} pending dates",
                    days[index],
                    cancelled,
                )
                raise
        return results

    def __enter__(self) -> ThreadPoolExecutorAdapter:
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        """Shut the pool down, waiting for dates still being listed."""
        self._pool.shutdown(wait=True)
        return None
