"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
a scripted in-memory listing transport plus a fixture catalog on disk.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import pytest

from smapcatalog.core.exceptions import TransportError


if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


ROOT = "ftp://catalog.test/SAN/SMAP/"

GPH_0331 = "SMAP_L4_SM_gph_20150331T013000_Vv2030_001"
GPH_0331_B = "SMAP_L4_SM_gph_20150331T043000_Vv2030_001"
GPH_0401 = "SMAP_L4_SM_gph_20150401T013000_Vv2030_001"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "core: Core models, parsing, validation and services"
    )
    config.addinivalue_line(
        "markers", "transport: Listing transport adapters (ftp, filesystem, router)"
    )
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


def ls_line(name: str, mode: str = "drwxr-xr-x", size: int = 4096) -> str:
    """One long-format listing line, 9 columns with the name last."""
    return f"{mode}    2 ftp      ftp      {size:>8} Mar 31  2015 {name}"


def ls_file(name: str, size: int = 1024) -> str:
    """Listing line for a regular file."""
    return ls_line(name, mode="-rw-r--r--", size=size)


def listing(*lines: str, total: int = 8) -> list[str]:
    """A listing with its 'total N' summary line."""
    return [f"total {total}", *lines]


class FakeTransport:
    """Scripted ListingTransport keeping track of opened and closed routes.

    Routes not in the script raise TransportError, like a missing folder on
    a real server.
    """

    def __init__(self, listings: dict[str, list[str]]) -> None:
        self.listings = listings
        self.opened: list[str] = []
        self.closed: list[str] = []

    @contextmanager
    def open(self, route: str) -> Iterator[Iterator[str]]:
        self.opened.append(route)
        try:
            if route not in self.listings:
                raise TransportError(f"No such folder: {route}", route=route)
            yield iter(self.listings[route])
        finally:
            self.closed.append(route)

    def count(self, route: str) -> int:
        return self.opened.count(route)


def smap_listings(root: str = ROOT) -> dict[str, list[str]]:
    """Catalog with SPL4SMGP versions 1 and 2 and SPL3SMP version 4."""
    version_route = f"{root}SPL4SMGP.002/"
    return {
        root: listing(
            ls_line("SPL3SMP.004"),
            ls_line("SPL4SMGP.001"),
            ls_line("SPL4SMGP.002"),
        ),
        version_route: listing(
            ls_line("2015.03.31"),
            ls_line("2015.04.01"),
            ls_line("2015.04.02"),
        ),
        f"{version_route}2015.03.31/": listing(
            ls_file(f"{GPH_0331}.h5"),
            ls_file(f"{GPH_0331}.h5.iso.xml"),
            ls_file(f"{GPH_0331}.qa"),
            ls_file(f"{GPH_0331_B}.h5"),
            ls_file(f"{GPH_0331_B}.h5.iso.xml"),
        ),
        f"{version_route}2015.04.01/": listing(
            ls_file(f"{GPH_0401}.h5"),
            ls_file(f"{GPH_0401}.h5.iso.xml"),
        ),
        f"{version_route}2015.04.02/": ["total 0"],
    }


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Scripted transport serving the SPL4SMGP test catalog under ROOT."""
    return FakeTransport(smap_listings())


@pytest.fixture
def fixture_catalog(tmp_path: Path) -> Path:
    """A catalog laid out on disk for FilesystemTransport.

    SPL4SMGP.002 has two dates with files and one empty date folder;
    SPL3SMP.004 has one date.
    """
    root = tmp_path / "SMAP"
    files = {
        "SPL4SMGP.002/2015.03.31": [
            f"{GPH_0331}.h5",
            f"{GPH_0331}.h5.iso.xml",
            f"{GPH_0331_B}.h5",
            f"{GPH_0331_B}.h5.iso.xml",
        ],
        "SPL4SMGP.002/2015.04.01": [f"{GPH_0401}.h5", f"{GPH_0401}.h5.iso.xml"],
        "SPL4SMGP.002/2015.04.02": [],
        "SPL3SMP.004/2016.04.01": [
            "SMAP_L3_SM_P_20160401_R14010_001.h5",
            "SMAP_L3_SM_P_20160401_R14010_001.qa",
        ],
    }
    for folder, names in files.items():
        directory = root / folder
        directory.mkdir(parents=True)
        for name in names:
            (directory / name).write_bytes(b"\x89HDF")
    return root
