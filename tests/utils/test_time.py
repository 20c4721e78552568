"""
Tests for calendar-day utilities.

Verifies day normalization and the timestamp form used in snapshots.
"""

import math
import pytest
from datetime import date, datetime, timedelta, timezone

from capital_tracker.utils.time import (
    day_to_timestamp,
    is_same_day,
    timestamp_to_day,
    to_calendar_day,
)


class TestToCalendarDay:
    """Test to_calendar_day function."""

    def test_date_unchanged(self):
        """Should return a date as is."""
        assert to_calendar_day(date(2026, 4, 1)) == date(2026, 4, 1)

    def test_datetime_truncated(self):
        """Should drop the time of day."""
        result = to_calendar_day(datetime(2026, 4, 1, 23, 59, 59))

        assert result == date(2026, 4, 1)
        assert type(result) is date

    def test_rejects_other_types(self):
        """Should reject strings and numbers."""
        with pytest.raises(TypeError):
            to_calendar_day("2026-04-01")


class TestIsSameDay:
    """Test is_same_day function."""

    def test_same_day_different_times(self):
        assert is_same_day(datetime(2026, 1, 1, 0, 0), datetime(2026, 1, 1, 23, 59))

    def test_date_and_datetime(self):
        assert is_same_day(date(2026, 1, 1), datetime(2026, 1, 1, 12))

    def test_adjacent_days(self):
        assert not is_same_day(date(2026, 1, 1), date(2026, 1, 2))


class TestTimestamps:
    """Test snapshot timestamp conversion."""

    def test_epoch(self):
        """Should map 1970-01-01 to zero."""
        assert day_to_timestamp(date(1970, 1, 1)) == 0.0

    def test_utc_midnight(self):
        """Should encode the day at UTC midnight."""
        expected = datetime(2026, 4, 1, tzinfo=timezone.utc).timestamp()
        assert day_to_timestamp(datetime(2026, 4, 1, 15, 30)) == expected

    def test_back_to_day(self):
        """Should decode any instant within the UTC day to that day."""
        midnight = day_to_timestamp(date(2026, 4, 1))

        assert timestamp_to_day(midnight) == date(2026, 4, 1)
        assert timestamp_to_day(midnight + timedelta(hours=23).total_seconds()) == date(2026, 4, 1)

    def test_integer_timestamp(self):
        """Should accept integral seconds."""
        assert timestamp_to_day(86400) == date(1970, 1, 2)

    @pytest.mark.parametrize("value", [math.nan, math.inf, "0", None, True])
    def test_invalid_timestamp(self, value):
        """Should reject non-finite and non-numeric values."""
        with pytest.raises(ValueError):
            timestamp_to_day(value)
