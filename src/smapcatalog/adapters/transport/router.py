"""RouterTransport composite adapter for URI scheme-based routing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from smapcatalog.core.exceptions import UnsupportedSchemeError


if TYPE_CHECKING:
    from collections.abc import Iterator
    from contextlib import AbstractContextManager

    from smapcatalog.core.ports import ListingTransport


def parse_uri_scheme(uri: str) -> str | None:
    """Extract the URI scheme from a route string.

    Args:
        uri: Route URI or local directory path.

    Returns:
        The scheme (e.g., 'ftp', 'file') or None for local paths.
    """
    if "://" in uri:
        scheme = uri.split("://", 1)[0]
        # Avoid confusing Windows drive letters (C:) with schemes
        if len(scheme) > 1:
            return scheme.lower()
    return None


def strip_file_scheme(uri: str) -> str:
    """Strip file:// prefix from URI, returning plain path."""
    if uri.startswith("file://"):
        return uri[len("file://") :]
    return uri


class RouterTransport:
    """Listing transport that routes to backends based on URI scheme.

    Implements ListingTransport by delegating to scheme-specific adapters.
    """

    def __init__(self, backends: dict[str | None, ListingTransport]) -> None:
        """Initialize with scheme-to-adapter mapping.

        Args:
            backends: Mapping of scheme (e.g., 'ftp', 'file') to adapter.
                Use None as key for default (local paths without scheme).
        """
        self._backends = backends

    def _get_backend_and_route(self, uri: str) -> tuple[ListingTransport, str]:
        """Get the appropriate backend and normalized route for a URI."""
        scheme = parse_uri_scheme(uri)
        if scheme in self._backends:
            route = strip_file_scheme(uri) if scheme == "file" else uri
            return self._backends[scheme], route
        if scheme is None and None in self._backends:
            return self._backends[None], uri
        raise UnsupportedSchemeError(uri, scheme, supported=list(self._backends))

    def open(self, route: str) -> AbstractContextManager[Iterator[str]]:
        """Open a listing by delegating to the appropriate backend."""
        backend, backend_route = self._get_backend_and_route(route)
        return backend.open(backend_route)


def create_router(timeout: float | None = None) -> RouterTransport:
    """Create a RouterTransport with default backends.

    Args:
        timeout: Network timeout in seconds for the FTP backend.

    Returns:
        RouterTransport with FtpTransport for ftp:// and FilesystemTransport
        for file:// and plain paths.
    """
    from smapcatalog.adapters.transport import FilesystemTransport, FtpTransport

    fs = FilesystemTransport()
    return RouterTransport(
        backends={
            "ftp": FtpTransport(timeout=timeout),
            "file": fs,
            None: fs,
        }
    )
