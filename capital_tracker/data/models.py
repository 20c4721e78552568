"""
Canonical data models for capital entries and session state.

Entries and targets are immutable; the mutable state lives in the entry
store and goal tracker, which replace these values rather than editing them.
"""

import math
import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ..errors import InvalidAmountError, InvalidTargetError
from ..utils.time import DateLike, to_calendar_day
from .currency import Currency


def _new_entry_id() -> str:
    return uuid.uuid4().hex


def coerce_amount(value: Any) -> float:
    """
    Convert a caller-supplied amount to a finite float.

    Strings are accepted so an upstream text field can pass its raw value;
    a comma decimal separator is treated as a dot.

    Raises:
        InvalidAmountError: If the value is not numeric or not finite
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be a number, got {value!r}", amount=value)

    if isinstance(value, str):
        text = value.strip().replace(",", ".")
        try:
            value = float(text)
        except ValueError:
            raise InvalidAmountError(f"Cannot parse amount: {value!r}", amount=value) from None

    if not isinstance(value, (int, float)):
        raise InvalidAmountError(f"Amount must be a number, got {value!r}", amount=value)

    amount = float(value)
    if not math.isfinite(amount):
        raise InvalidAmountError(f"Amount must be finite, got {amount}", amount=amount)

    return amount


@dataclass(frozen=True)
class CapitalEntry:
    """One calendar-day capital snapshot."""
    date: date                  # Calendar day, no time of day
    amount: float               # Signed net worth in the session currency
    id: str = field(default_factory=_new_entry_id)

    @classmethod
    def create(cls, day: DateLike, amount: Any, entry_id: Optional[str] = None) -> "CapitalEntry":
        """
        Build an entry from loosely typed input.

        Raises:
            InvalidAmountError: If the amount is not a finite number
        """
        kwargs = {"date": to_calendar_day(day), "amount": coerce_amount(amount)}
        if entry_id is not None:
            kwargs["id"] = entry_id
        return cls(**kwargs)

    def __lt__(self, other: "CapitalEntry") -> bool:
        if not isinstance(other, CapitalEntry):
            return NotImplemented
        return self.date < other.date

    @property
    def is_negative(self) -> bool:
        return self.amount < 0


@dataclass(frozen=True)
class Target:
    """Savings goal: an amount to reach by a date."""
    amount: float
    date: date

    @classmethod
    def create(cls, amount: Any, day: DateLike) -> "Target":
        """
        Build a validated target.

        Raises:
            InvalidTargetError: If the amount is not finite or not positive
        """
        try:
            value = coerce_amount(amount)
        except InvalidAmountError as e:
            raise InvalidTargetError(str(e), amount=amount) from e

        if value <= 0:
            raise InvalidTargetError(f"Target amount must be positive, got {value}", amount=value)

        return cls(amount=value, date=to_calendar_day(day))


@dataclass(frozen=True)
class SessionState:
    """Everything persisted as one snapshot."""
    entries: tuple[CapitalEntry, ...]
    target: Target
    currency: Currency

