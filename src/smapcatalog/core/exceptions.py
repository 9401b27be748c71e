"""Domain exceptions for smapcatalog.

All library errors inherit from SmapCatalogError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

Every error is terminal for a find() call: nothing is retried and no partial
table is returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from datetime import date


class SmapCatalogError(Exception):
    """Base class for all smapcatalog exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigurationError(SmapCatalogError):
    """Raised for configuration problems (malformed settings)."""

    pass


class UnsupportedSchemeError(ConfigurationError):
    """Raised when a catalog root uses a scheme no transport handles.

    Attributes:
        route: The route that could not be opened.
        scheme: Its URI scheme, or None for a plain path.
        supported: Schemes with a registered transport.
    """

    def __init__(
        self, route: str, scheme: str | None, supported: list[str | None]
    ) -> None:
        self.route = route
        self.scheme = scheme
        self.supported = supported
        scheme_display = f"'{scheme}'" if scheme else "local path"
        super().__init__(
            f"No listing transport registered for scheme {scheme_display} "
            f"(route {route})"
        )

    @property
    def recovery_hint(self) -> str:
        """List the roots that can be used instead."""
        forms = [f"{s}://..." if s else "a local path" for s in self.supported]
        return f"Use a catalog root of the form: {', '.join(forms)}"


class DateFormatError(SmapCatalogError, ValueError):
    """Raised when a date input cannot be coerced to a calendar date.

    Attributes:
        value: The offending input value.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Couldn't coerce {value!r} to a date. "
            "Try formatting date(s) as YYYY-MM-DD, or pass datetime.date objects."
        )

    @property
    def recovery_hint(self) -> str:
        """Show the accepted format."""
        return "Use dates like '2015-03-31' or datetime.date(2015, 3, 31)"


class UnknownDatasetError(SmapCatalogError):
    """Raised when a dataset id is absent from the catalog root listing.

    Attributes:
        dataset_id: The dataset id that was not found.
        root: The catalog root that was listed.
        available: Dataset ids present at the root.
    """

    def __init__(
        self, dataset_id: str, root: str, available: list[str] | None = None
    ) -> None:
        self.dataset_id = dataset_id
        self.root = root
        self.available = available if available is not None else []
        super().__init__(f"Invalid data id. {dataset_id} does not exist at {root}")

    @property
    def recovery_hint(self) -> str:
        """Suggest the dataset ids the catalog does offer."""
        if self.available:
            return f"Available datasets: {', '.join(self.available)}"
        return f"Check the listing of {self.root} for valid dataset ids"


class UnknownVersionError(SmapCatalogError):
    """Raised when the exact versioned folder is absent from the catalog root.

    Attributes:
        dataset_id: The requested dataset id.
        version: The requested version number.
        expected_folder: The folder name that was looked for (e.g. SPL4SMGP.002).
        root: The catalog root that was listed.
    """

    def __init__(
        self, dataset_id: str, version: int, expected_folder: str, root: str
    ) -> None:
        self.dataset_id = dataset_id
        self.version = version
        self.expected_folder = expected_folder
        self.root = root
        super().__init__(
            f"Invalid data version. {expected_folder} does not exist at {root}"
        )

    @property
    def recovery_hint(self) -> str:
        """Suggest checking published versions."""
        return f"Check which versions of {self.dataset_id} are published at {self.root}"


class DateNotAvailableError(SmapCatalogError):
    """Raised when a date folder is absent under the dataset+version folder.

    Attributes:
        dataset_id: The requested dataset id.
        version: The requested version number.
        date: The requested calendar date.
        route: The version folder route that was listed.
    """

    def __init__(self, dataset_id: str, version: int, date: date, route: str) -> None:
        self.dataset_id = dataset_id
        self.version = version
        self.date = date
        self.route = route
        super().__init__(
            "Data are not available for this date. "
            f"{date:%Y.%m.%d} does not exist at {route}"
        )

    @property
    def recovery_hint(self) -> str:
        """Suggest listing the version folder."""
        return f"List {self.route} to see which dates are available"


class EmptyDirectoryError(SmapCatalogError):
    """Raised when a remote folder exists but its listing is 'total 0'.

    Attributes:
        route: The remote folder that is empty.
    """

    def __init__(self, route: str) -> None:
        self.route = route
        super().__init__(f"Remote directory {route} exists, but is empty")

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the folder for a later upload."""
        return (
            f"{self.route} holds no files yet; pick another date or retry "
            "once the data are published"
        )


class ListingParseError(SmapCatalogError):
    """Raised when directory-listing text doesn't have the expected columns.

    Attributes:
        route: The remote folder whose listing failed to parse.
        line: The offending listing line, if any.
    """

    def __init__(self, message: str, route: str, line: str | None = None) -> None:
        self.route = route
        self.line = line
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Point at the raw listing."""
        return f"Inspect the raw listing of {self.route}"


class TransportError(SmapCatalogError):
    """Raised when the listing transport fails at the connection level.

    Attributes:
        route: The remote path that was being listed.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        route: str,
        cause: Exception | None = None,
    ) -> None:
        self.route = route
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking connectivity."""
        return f"Check network access to {self.route} and that the path exists"
