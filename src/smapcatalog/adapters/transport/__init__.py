"""Listing transport adapters."""

from smapcatalog.adapters.transport.filesystem import FilesystemTransport
from smapcatalog.adapters.transport.ftp import FtpTransport
from smapcatalog.adapters.transport.router import RouterTransport, create_router


__all__ = ["FilesystemTransport", "FtpTransport", "RouterTransport", "create_router"]
