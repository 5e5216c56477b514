"""
Utility functions for Bodyfile Timeline.

This module contains helper functions for epoch conversion,
bodyfile number parsing and date filter parsing.
"""

import re
from datetime import datetime, timedelta, timezone

from .constants import (
    DATE_FORMAT,
    DATE_FORMAT_MESSAGE,
    DATE_RANGE_SEPARATOR,
    FILTER_FORMAT_MESSAGE,
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
)
from .models import DateFilter

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_SIGNED_INT_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT_RE = re.compile(r"\+?[0-9]+")


def timestamp_to_datetime(timestamp: int) -> datetime:
    """
    Convert Unix epoch seconds to a UTC datetime.

    Negative values (instants before 1970) are supported.

    Args:
        timestamp: Seconds since 1970-01-01 00:00:00 UTC.

    Returns:
        Timezone-aware datetime in UTC.

    Raises:
        ValueError: If the instant is outside the range datetime supports.
    """
    try:
        return EPOCH + timedelta(seconds=timestamp)
    except OverflowError as e:
        raise ValueError(f"timestamp out of range: {timestamp}") from e


def parse_epoch(value: str) -> datetime:
    """
    Parse a bodyfile time column (decimal epoch seconds) to a UTC datetime.

    Raises:
        ValueError: If the text is not a signed 64-bit decimal integer
                    or the instant cannot be represented.
    """
    if not _SIGNED_INT_RE.fullmatch(value):
        raise ValueError(f"invalid digit found in string: {value!r}")

    timestamp = int(value)
    if not INT64_MIN <= timestamp <= INT64_MAX:
        raise ValueError(f"number too large to fit in target type: {value!r}")

    return timestamp_to_datetime(timestamp)


def parse_size(value: str) -> int:
    """
    Parse a bodyfile size column (unsigned 64-bit decimal).

    Raises:
        ValueError: If the text is not an unsigned decimal integer in range.
    """
    if not _UNSIGNED_INT_RE.fullmatch(value):
        raise ValueError(f"invalid digit found in string: {value!r}")

    size = int(value)
    if size > UINT64_MAX:
        raise ValueError(f"number too large to fit in target type: {value!r}")
    return size


def parse_date_filter(filter_str: str) -> DateFilter:
    """
    Parse a date range of the form ``YYYY-MM-DD..YYYY-MM-DD``.

    Both dates are calendar dates in UTC; time of day is not handled.

    Args:
        filter_str: The range string to parse.

    Returns:
        DateFilter covering both dates inclusively.

    Raises:
        ValueError: If the string is not two ``..``-separated ISO dates,
                    or the start date is after the end date.
    """
    dates = filter_str.split(DATE_RANGE_SEPARATOR)
    if len(dates) != 2:
        raise ValueError(FILTER_FORMAT_MESSAGE)

    start, end = (_parse_date(d) for d in dates)
    return DateFilter(start=start, end=end)


def _parse_date(date_str: str):
    try:
        return datetime.strptime(date_str, DATE_FORMAT).date()
    except ValueError:
        raise ValueError(DATE_FORMAT_MESSAGE) from None
