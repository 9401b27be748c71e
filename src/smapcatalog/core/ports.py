"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence
    from contextlib import AbstractContextManager
    from datetime import date

    from smapcatalog.core.models import CatalogRow


@runtime_checkable
class ListingTransport(Protocol):
    """Remote directory-listing backend (FTP, local filesystem)."""

    def open(self, route: str) -> AbstractContextManager[Iterator[str]]:
        """Open a connection to route and yield its listing lines.

        The connection is released when the context exits, whether the
        lines were fully consumed or an exception was raised.

        Args:
            route: Absolute remote folder route, ending with "/".

        Returns:
            Context manager yielding an iterator of raw listing lines
            (long format, first line usually a 'total N' summary).

        Raises:
            TransportError: If the connection or listing fails.
        """
        ...


@runtime_checkable
class ExecutorPort(Protocol):
    """Runs the per-date lookups of a find() call.

    The core domain depends on this protocol rather than on a thread pool,
    keeping concurrency in the adapters. The executor's lifecycle belongs
    to whoever created it.
    """

    def run_dates(
        self,
        lookup: Callable[[date], list[CatalogRow]],
        days: Sequence[date],
    ) -> list[list[CatalogRow]]:
        """Run lookup for every date.

        Args:
            lookup: Validates and lists one date, returning its rows.
            days: Dates to look up.

        Returns:
            One list of rows per date, in the order of days, whatever the
            order in which lookups finished.

        Raises:
            The error of the earliest failing date in the order of days.
            Dates that have not started by then are not looked up.
        """
        ...

    def __enter__(self) -> ExecutorPort:
        """Enter context manager."""
        ...

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        """Exit context manager, releasing any workers."""
        ...
