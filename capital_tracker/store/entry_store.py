"""Ordered, one-per-day store of capital entries."""

import dataclasses
from datetime import datetime
from typing import Callable, Iterable, Iterator, Optional

from ..data.models import CapitalEntry, coerce_amount
from ..logging.config import get_store_logger, log_mutation
from ..utils.time import DateLike, is_same_day, to_calendar_day

logger = get_store_logger(__name__)

ChangeListener = Callable[[str], None]

ENTRY_UPSERTED = "entry_upserted"
ENTRY_REMOVED = "entry_removed"


class EntryStore:
    """
    Owns the capital entry sequence.

    Invariants:
    - at most one entry per calendar day
    - entries are sorted ascending by date

    Every successful mutation calls the change listener, which the session
    wires to a full snapshot write.
    """

    def __init__(self, entries: Iterable[CapitalEntry] = (),
                 on_change: Optional[ChangeListener] = None) -> None:
        self._entries: list[CapitalEntry] = []
        self.on_change = on_change
        self.replace_all(entries)

    @property
    def entries(self) -> tuple[CapitalEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CapitalEntry]:
        return iter(tuple(self._entries))

    def __bool__(self) -> bool:
        return bool(self._entries)

    def upsert(self, entry: CapitalEntry) -> CapitalEntry:
        """
        Insert an entry, replacing any entry on the same calendar day.

        The replacement key is the day: a later call for the same day always
        wins. An entry with the same id on another day is moved, not copied.

        Raises:
            InvalidAmountError: If the entry amount is not a finite number
        """
        entry = self._normalized(entry)

        replaced = [e for e in self._entries if self._collides(e, entry)]
        self._entries = [e for e in self._entries if not self._collides(e, entry)]
        self._entries.append(entry)
        self._entries.sort(key=lambda e: e.date)

        log_mutation(logger, "upsert", {
            "entry_id": entry.id,
            "date": entry.date.isoformat(),
            "amount": entry.amount,
            "replaced": len(replaced),
        })
        self._notify(ENTRY_UPSERTED)
        return entry

    def remove(self, entry: CapitalEntry) -> bool:
        """
        Delete an entry by identity.

        Returns:
            True if the entry was present and removed
        """
        remaining = [e for e in self._entries if e.id != entry.id]
        if len(remaining) == len(self._entries):
            logger.debug("Remove ignored, entry not in store", entry_id=entry.id)
            return False

        self._entries = remaining
        log_mutation(logger, "remove", {"entry_id": entry.id, "date": entry.date.isoformat()})
        self._notify(ENTRY_REMOVED)
        return True

    def reset(self) -> None:
        """Clear all entries without notifying; the caller persists the reset."""
        self._entries = []

    def replace_all(self, entries: Iterable[CapitalEntry]) -> None:
        """
        Load a sequence, enforcing the store invariants.

        Used when restoring a snapshot. When two entries share a day or an
        id, the one appearing later in the input wins. Does not notify.

        Raises:
            InvalidAmountError: If an entry amount is not a finite number
        """
        loaded: list[CapitalEntry] = []
        for entry in entries:
            entry = self._normalized(entry)
            loaded = [e for e in loaded if not self._collides(e, entry)]
            loaded.append(entry)
        self._entries = sorted(loaded, key=lambda e: e.date)

    def get_for_date(self, day: DateLike) -> Optional[CapitalEntry]:
        """Entry recorded on the given calendar day, if any."""
        for entry in self._entries:
            if is_same_day(entry.date, day):
                return entry
        return None

    def get_previous(self, before: DateLike) -> Optional[CapitalEntry]:
        """Last entry whose day is strictly earlier than ``before``."""
        before = to_calendar_day(before)
        previous = None
        for entry in self._entries:
            if entry.date >= before:
                break
            previous = entry
        return previous

    def position_of(self, entry: CapitalEntry) -> Optional[int]:
        """Zero-based position of the entry (matched by id), or None."""
        for index, candidate in enumerate(self._entries):
            if candidate.id == entry.id:
                return index
        return None

    def latest(self) -> Optional[CapitalEntry]:
        """Chronologically last entry."""
        return self._entries[-1] if self._entries else None

    def amounts(self) -> list[float]:
        return [e.amount for e in self._entries]

    @staticmethod
    def _normalized(entry: CapitalEntry) -> CapitalEntry:
        """Entry with a finite float amount and a day-only date."""
        amount = coerce_amount(entry.amount)
        if type(entry.amount) is not float or isinstance(entry.date, datetime):
            entry = dataclasses.replace(entry, date=to_calendar_day(entry.date), amount=amount)
        return entry

    @staticmethod
    def _collides(existing: CapitalEntry, entry: CapitalEntry) -> bool:
        return existing.date == entry.date or existing.id == entry.id

    def _notify(self, kind: str) -> None:
        if self.on_change is not None:
            self.on_change(kind)
