"""Core domain models for smapcatalog.

These models are pure Python dataclasses with no I/O dependencies.
They represent the remote folder layout and the rows of a discovery result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from datetime import date

    import pandas as pd


COLUMNS = ("name", "date", "ftp_dir")


@dataclass(frozen=True, slots=True)
class RemotePath:
    """The three levels of remote path for one dataset, version and date.

    Attributes:
        catalog_root: Base address of the catalog, ending with "/".
        dataset_folder: Versioned folder name, e.g. "SPL4SMGP.002".
        date_folder: Dot-formatted date folder name, e.g. "2015.03.31".

    Example:
        >>> p = RemotePath("ftp://host/SMAP/", "SPL4SMGP.002", "2015.03.31")
        >>> p.data_route
        'ftp://host/SMAP/SPL4SMGP.002/2015.03.31/'
    """

    catalog_root: str
    dataset_folder: str
    date_folder: str

    @property
    def version_route(self) -> str:
        """Absolute route of the dataset+version folder (lists dates)."""
        return f"{self.catalog_root}{self.dataset_folder}/"

    @property
    def data_route(self) -> str:
        """Absolute route of the date folder (lists files)."""
        return f"{self.version_route}{self.date_folder}/"

    @property
    def relative_dir(self) -> str:
        """Dataset+version fragment relative to the catalog root."""
        return f"{self.dataset_folder}/"


@dataclass(frozen=True, slots=True)
class CatalogRow:
    """One discovered logical product.

    Attributes:
        name: Filename with its extension stripped.
        date: Calendar date of the folder the file was found in.
        ftp_dir: Dataset+version directory relative to the catalog root.
    """

    name: str
    date: date
    ftp_dir: str

    def __post_init__(self) -> None:
        """Validate row fields after initialization."""
        if not self.name:
            raise ValueError("CatalogRow name cannot be empty")


@dataclass(frozen=True, slots=True)
class CatalogTable:
    """Ordered, immutable sequence of CatalogRow.

    Rows are grouped by date in the order dates were requested, and within a
    date in listing order.
    """

    rows: tuple[CatalogRow, ...] = ()

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[CatalogRow]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> CatalogRow:
        return self.rows[index]

    @property
    def names(self) -> list[str]:
        """Product names in table order."""
        return [row.name for row in self.rows]

    @property
    def dates(self) -> list[date]:
        """Row dates in table order."""
        return [row.date for row in self.rows]

    @classmethod
    def concat(cls, parts: Iterable[Iterable[CatalogRow]]) -> Self:
        """Concatenate row groups, keeping the order they are given in."""
        return cls(rows=tuple(row for part in parts for row in part))

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a pandas DataFrame with columns name, date, ftp_dir.

        An empty table still yields the three columns.
        """
        import pandas as pd

        return pd.DataFrame(
            [(row.name, row.date, row.ftp_dir) for row in self.rows],
            columns=list(COLUMNS),
        )
