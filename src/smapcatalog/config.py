"""Configuration for smapcatalog.

Settings have library defaults and can be overridden from the environment:

- SMAPCATALOG_ROOT: catalog root address
- SMAPCATALOG_NAME_PREFIX: product filename prefix
- SMAPCATALOG_MAX_WORKERS: parallel dates (1 = sequential)
- SMAPCATALOG_TIMEOUT: network timeout in seconds
- SMAPCATALOG_REVALIDATE: re-check dataset/version for every date (true/false)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Self

from smapcatalog.core.exceptions import ConfigurationError
from smapcatalog.core.paths import normalize_root


DEFAULT_CATALOG_ROOT = "ftp://n5eil01u.ecs.nsidc.org/SAN/SMAP/"
DEFAULT_NAME_PREFIX = "SMAP"

ENV_PREFIX = "SMAPCATALOG_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class FinderConfig:
    """Settings for a Finder.

    Attributes:
        catalog_root: Base address under which dataset folders live.
        name_prefix: Prefix of product filenames; locates the name column
            in date-folder listings.
        revalidate_per_date: Re-run the dataset and version checks for every
            date. False checks them once per call.
        max_workers: Number of dates processed concurrently.
        timeout: Network timeout in seconds for transports that support it.

    Example:
        >>> config = FinderConfig(catalog_root="file:///mirror/SMAP")
        >>> config.catalog_root
        'file:///mirror/SMAP/'
    """

    catalog_root: str = DEFAULT_CATALOG_ROOT
    name_prefix: str = DEFAULT_NAME_PREFIX
    revalidate_per_date: bool = True
    max_workers: int = 1
    timeout: float | None = None

    def __post_init__(self) -> None:
        """Validate and normalize settings after initialization."""
        if not self.catalog_root.strip():
            raise ConfigurationError("catalog_root cannot be empty")
        if not self.name_prefix:
            raise ConfigurationError("name_prefix cannot be empty")
        if self.max_workers < 1:
            raise ConfigurationError(
                f"max_workers must be at least 1, got {self.max_workers}"
            )
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        # frozen dataclass: bypass __setattr__ to store the normalized root
        object.__setattr__(self, "catalog_root", normalize_root(self.catalog_root))

    def with_root(self, catalog_root: str) -> Self:
        """Return a copy pointing at another catalog root."""
        return replace(self, catalog_root=catalog_root)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build a config from SMAPCATALOG_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ConfigurationError: If a variable has a malformed value.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        if root := env.get(f"{ENV_PREFIX}ROOT"):
            kwargs["catalog_root"] = root
        if prefix := env.get(f"{ENV_PREFIX}NAME_PREFIX"):
            kwargs["name_prefix"] = prefix
        if workers := env.get(f"{ENV_PREFIX}MAX_WORKERS"):
            kwargs["max_workers"] = _parse_number(int, "MAX_WORKERS", workers)
        if timeout := env.get(f"{ENV_PREFIX}TIMEOUT"):
            kwargs["timeout"] = _parse_number(float, "TIMEOUT", timeout)
        if revalidate := env.get(f"{ENV_PREFIX}REVALIDATE"):
            kwargs["revalidate_per_date"] = _parse_bool("REVALIDATE", revalidate)

        return cls(**kwargs)  # type: ignore[arg-type]


def _parse_number(kind: type[int] | type[float], name: str, raw: str) -> int | float:
    try:
        return kind(raw)
    except ValueError:
        raise ConfigurationError(
            f"{ENV_PREFIX}{name} must be a {kind.__name__}, got {raw!r}"
        ) from None


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{ENV_PREFIX}{name} must be true or false, got {raw!r}")
