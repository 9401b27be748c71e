"""Logging setup for smapcatalog.

The library logs through loguru and is disabled by default, so importing it
never writes anything. Applications (and the CLI's --verbose flag) opt in
with configure_logging().
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from loguru import logger

from smapcatalog.core.exceptions import ConfigurationError


if TYPE_CHECKING:
    from typing import TextIO


PACKAGE = "smapcatalog"

LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(
    level: str = "INFO",
    sink: TextIO | None = None,
    format_template: str = DEFAULT_FORMAT,
) -> int:
    """Enable smapcatalog logging and add one sink.

    Args:
        level: Minimum level, case-insensitive.
        sink: Stream to write to (default: sys.stderr).
        format_template: loguru format string.

    Returns:
        The loguru sink id, for logger.remove().

    Raises:
        ConfigurationError: If level isn't a loguru level name.
    """
    validated = level.upper()
    if validated not in LEVELS:
        raise ConfigurationError(
            f"Invalid log level {level!r}, expected one of {', '.join(LEVELS)}"
        )

    logger.enable(PACKAGE)
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=validated,
        format=format_template,
        filter=PACKAGE,
        colorize=False if sink is not None else None,
    )


def disable_logging() -> None:
    """Silence smapcatalog's log records again."""
    logger.disable(PACKAGE)
