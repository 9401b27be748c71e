"""Scoped listing fetches over a ListingTransport."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from loguru import logger


if TYPE_CHECKING:
    from collections.abc import Callable

    from smapcatalog.core.ports import ListingTransport


T = TypeVar("T")


def read_listing(
    transport: ListingTransport,
    route: str,
    parse: Callable[[list[str]], T],
) -> T:
    """Fetch the listing of route and parse it while the connection is open.

    The connection is closed on every exit path, including errors raised by
    parse.

    Args:
        transport: Listing backend.
        route: Absolute remote folder route.
        parse: Function turning the raw lines into a result.

    Returns:
        Whatever parse returns.
    """
    with transport.open(route) as stream:
        lines = list(stream)
        logger.debug("Listed {} ({} lines)", route, len(lines))
        return parse(lines)
