"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("jira-dashboard.utils.date")

INVALID_DATE = "Invalid Date"

_PARSE_ERRORS = (ValueError, TypeError, AttributeError, OverflowError, OSError)
_YEAR_START = datetime(2000, 1, 1)


def _is_epoch_string(value: str) -> bool:
    return value.isascii() and value.isdecimal() and len(value) > 8


def parse_date(date_str: str | int | float | None) -> datetime | None:
    """
    Parse a Jira date value into a datetime.

    The input accepts:
    - None or empty string
    - Epoch timestamp in milliseconds (int, float, or a digit-only string
      longer than a year or compact date)
    - Other formats supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    Args:
        date_str: Date value

    Returns:
        Parsed datetime or None if date_str is empty

    Raises:
        ValueError: If the value cannot be parsed
    """
    if date_str is None or date_str == "":
        return None
    if isinstance(date_str, bool):
        raise ValueError(f"Not a date: {date_str!r}")
    if isinstance(date_str, int | float):
        return datetime.fromtimestamp(date_str / 1000, tz=timezone.utc)
    if _is_epoch_string(date_str):
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    try:
        # Missing parts default to January 1st, so "2024" is a year
        return dateutil.parser.parse(date_str, default=_YEAR_START)
    except (OverflowError, dateutil.parser.ParserError) as e:
        raise ValueError(f"Not a date: {date_str!r}") from e


def _to_local(dt: datetime) -> datetime:
    # Aware values are shown in the server's local time; naive values are
    # assumed to already be local.
    if dt.tzinfo is not None:
        return dt.astimezone()
    return dt


def format_locale_date(value: str | int | float | None) -> str:
    """Render a date value as ``M/D/YYYY``, or ``Invalid Date``."""
    try:
        dt = parse_date(value)
        if dt is None:
            return INVALID_DATE
        dt = _to_local(dt)
    except _PARSE_ERRORS:
        return INVALID_DATE
    return f"{dt.month}/{dt.day}/{dt.year}"


def format_locale_datetime(value: str | int | float | None) -> str:
    """Render a date value as ``M/D/YYYY, h:MM:SS AM``, or ``Invalid Date``."""
    try:
        dt = parse_date(value)
        if dt is None:
            return INVALID_DATE
        dt = _to_local(dt)
    except _PARSE_ERRORS:
        return INVALID_DATE
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return (
        f"{dt.month}/{dt.day}/{dt.year}, "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    )
