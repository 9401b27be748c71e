"""FTP listing transport using ftplib."""

from __future__ import annotations

import ftplib
from contextlib import contextmanager
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from loguru import logger

from smapcatalog.core.exceptions import TransportError


if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


_DEFAULT_PORT = 21


class FtpTransport:
    """Listing transport for ftp:// routes.

    Implements ListingTransport. Every open() makes its own connection
    (anonymous unless the route carries credentials), issues one LIST, and
    closes the connection when the context exits.
    """

    def __init__(
        self,
        timeout: float | None = None,
        ftp_factory: Callable[..., ftplib.FTP] = ftplib.FTP,
    ) -> None:
        """Initialize the FTP transport.

        Args:
            timeout: Socket timeout in seconds. None blocks indefinitely.
            ftp_factory: Callable creating an unconnected FTP client.
        """
        self._timeout = timeout
        self._ftp_factory = ftp_factory

    @contextmanager
    def open(self, route: str) -> Iterator[Iterator[str]]:
        """Connect, list route, and yield the listing lines.

        Args:
            route: ftp://host[:port]/path/ URL.

        Raises:
            TransportError: If connecting, logging in or listing fails.
        """
        url = urlparse(route)
        if url.scheme != "ftp" or not url.hostname:
            raise TransportError(f"Not an ftp:// URL: {route}", route=route)

        ftp = self._connect(route, url.hostname, url.port, url.username, url.password)
        try:
            lines: list[str] = []
            try:
                ftp.retrlines(f"LIST {url.path or '/'}", lines.append)
            except ftplib.all_errors as e:
                raise TransportError(
                    f"Listing failed for {route}: {e}",
                    route=route,
                    cause=e,
                ) from e
            yield iter(lines)
        finally:
            ftp.close()

    def _connect(
        self,
        route: str,
        host: str,
        port: int | None,
        user: str | None,
        password: str | None,
    ) -> ftplib.FTP:
        ftp = self._ftp_factory()
        try:
            if self._timeout is None:
                ftp.connect(host, port or _DEFAULT_PORT)
            else:
                ftp.connect(host, port or _DEFAULT_PORT, timeout=self._timeout)
            ftp.login(user or "anonymous", password or "")
            ftp.set_pasv(True)
        except ftplib.all_errors as e:
            ftp.close()
            raise TransportError(
                f"Could not connect to {host}: {e}",
                route=route,
                cause=e,
            ) from e
        logger.debug("Connected to {}", host)
        return ftp
