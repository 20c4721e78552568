"""Analytics engine bound to the entry store"""

from typing import Optional

from ..data.models import CapitalEntry
from ..store.entry_store import EntryStore
from .moving_average import moving_average_at, moving_average_series
from .trendline import Trendline, fit_trendline


class AnalyticsEngine:
    """
    Read-side analytics over the current entry sequence

    Nothing is cached: every call reads the store as it is now.
    """

    def __init__(self, entries: EntryStore):
        self.entries = entries

    def moving_average(self, entry: CapitalEntry, window_days: int) -> Optional[float]:
        """
        Moving average ending at the entry's position in the sequence

        An entry that is not in the store (for example a stale copy from
        before a same-day upsert) is treated as position 0.

        Args:
            entry: Entry obtained from the store
            window_days: Number of most recent positions to average

        Returns:
            Average, or None only when the store is empty
        """
        position = self.entries.position_of(entry)
        if position is None:
            position = 0
        return moving_average_at(self.entries.amounts(), position, window_days)

    def moving_average_series(self, window_days: int) -> list[float]:
        """Moving average for every entry, in order"""
        return moving_average_series(self.entries.amounts(), window_days)

    def trendline(self) -> Optional[Trendline]:
        """Least-squares fit, None with fewer than 2 entries"""
        return fit_trendline(self.entries.amounts())
