"""Core domain module for smapcatalog.

This module contains pure Python domain models, port definitions and the
validation and discovery logic. It does no I/O of its own; all listings
come through a ListingTransport.
"""

from smapcatalog.core.models import CatalogRow, CatalogTable, RemotePath
from smapcatalog.core.ports import ExecutorPort, ListingTransport


__all__ = [
    "CatalogRow",
    "CatalogTable",
    "ExecutorPort",
    "ListingTransport",
    "RemotePath",
]
