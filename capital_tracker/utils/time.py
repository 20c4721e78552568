"""
Calendar-day utilities for entry and target dates.

Entries are keyed by calendar day. These helpers normalize incoming
date/datetime values and convert days to and from the absolute timestamps
used in persisted snapshots.
"""

import math
from datetime import date, datetime, timezone
from typing import Union

DateLike = Union[date, datetime]


def to_calendar_day(value: DateLike) -> date:
    """
    Strip any time-of-day from a date or datetime.

    Args:
        value: Date or datetime supplied by the caller

    Returns:
        The calendar day of the value

    Raises:
        TypeError: If value is neither a date nor a datetime
    """
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def is_same_day(left: DateLike, right: DateLike) -> bool:
    """Check whether two values fall on the same calendar day."""
    return to_calendar_day(left) == to_calendar_day(right)


def day_to_timestamp(day: DateLike) -> float:
    """
    Convert a calendar day to Unix seconds at UTC midnight.

    Args:
        day: Calendar day to serialize

    Returns:
        Seconds since the Unix epoch
    """
    day = to_calendar_day(day)
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return midnight.timestamp()


def timestamp_to_day(ts: float) -> date:
    """
    Convert Unix seconds back to the UTC calendar day.

    Args:
        ts: Seconds since the Unix epoch

    Returns:
        Calendar day containing the timestamp in UTC

    Raises:
        ValueError: If the timestamp is not a finite number
    """
    if isinstance(ts, bool) or not isinstance(ts, (int, float)) or not math.isfinite(ts):
        raise ValueError(f"Invalid timestamp: {ts!r}")
    return datetime.fromtimestamp(ts, tz=timezone.utc).date()
