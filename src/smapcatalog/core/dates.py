"""Date normalization for find() inputs."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from smapcatalog.core.exceptions import DateFormatError


DateLike = date | str

ISO_FORMAT = "%Y-%m-%d"
FOLDER_FORMAT = "%Y.%m.%d"


def to_date(value: DateLike) -> date:
    """Coerce a single value to a calendar date.

    Args:
        value: A date/datetime, or text formatted as YYYY-MM-DD.

    Returns:
        The calendar date. Datetimes lose their time component.

    Raises:
        DateFormatError: If the value can't be parsed as a calendar date.
    """
    # datetime subclasses date, so check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), ISO_FORMAT).date()
        except ValueError as e:
            raise DateFormatError(value) from e
    raise DateFormatError(value)


def normalize_dates(dates: DateLike | Iterable[DateLike]) -> list[date]:
    """Coerce one or more date inputs to calendar dates, keeping input order.

    Args:
        dates: A single date/string or an iterable of them
            (e.g. a list, or a pandas DatetimeIndex).

    Returns:
        List of dates in the order given. Duplicates are kept.

    Raises:
        DateFormatError: If any value can't be parsed.
    """
    if isinstance(dates, (date, str)):
        return [to_date(dates)]
    return [to_date(value) for value in dates]


def folder_name(day: date) -> str:
    """Format a date the way remote date folders are named (YYYY.MM.DD)."""
    return day.strftime(FOLDER_FORMAT)
