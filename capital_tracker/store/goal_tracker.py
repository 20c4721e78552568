"""Savings goal state and progress relative to the latest entry."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..data.models import Target
from ..logging.config import get_store_logger, log_mutation
from ..utils.time import DateLike
from .entry_store import EntryStore

logger = get_store_logger(__name__)

TARGET_UPDATED = "target_updated"


@dataclass(frozen=True)
class GoalProgress:
    """Progress summary for display."""
    current: float              # Amount of the latest entry
    remaining: float            # Target minus current, negative once exceeded
    progress: float             # Unclamped ratio, 1.0 = goal reached
    bar_fraction: float         # Ratio clamped to 1.0 for a progress bar
    reached: bool

    @property
    def percent(self) -> float:
        return self.progress * 100.0


class GoalTracker:
    """Holds the target and derives progress from the entry store."""

    def __init__(self, target: Target, entries: EntryStore,
                 on_change: Optional[Callable[[str], None]] = None) -> None:
        self._target = target
        self._entries = entries
        self.on_change = on_change

    @property
    def target(self) -> Target:
        return self._target

    def update(self, amount: Any, day: DateLike) -> Target:
        """
        Replace the target.

        Raises:
            InvalidTargetError: If the amount is not finite or not positive;
                the previous target is kept
        """
        target = Target.create(amount, day)
        previous = self._target
        self._target = target

        log_mutation(logger, "update_target", {
            "amount": target.amount,
            "date": target.date.isoformat(),
            "previous_amount": previous.amount,
        })
        if self.on_change is not None:
            self.on_change(TARGET_UPDATED)
        return target

    def reset(self, target: Target) -> None:
        """Restore a default target without notifying."""
        self._target = target

    def current_amount(self) -> Optional[float]:
        """Amount of the chronologically last entry, None for an empty store."""
        latest = self._entries.latest()
        return latest.amount if latest is not None else None

    def progress(self, current_amount: float) -> Optional[float]:
        """Unclamped progress ratio, None when the target amount is not positive."""
        if self._target.amount <= 0:
            return None
        return current_amount / self._target.amount

    def remaining(self, current_amount: float) -> float:
        return self._target.amount - current_amount

    def summary(self) -> Optional[GoalProgress]:
        """Progress against the latest entry, or None if it cannot be computed."""
        current = self.current_amount()
        if current is None:
            return None

        progress = self.progress(current)
        if progress is None:
            return None

        return GoalProgress(
            current=current,
            remaining=self.remaining(current),
            progress=progress,
            bar_fraction=min(progress, 1.0),
            reached=progress >= 1.0,
        )
