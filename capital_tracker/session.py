"""
Session coordinator.

Owns the entry store and goal tracker for one user session, persists a full
snapshot after every mutation and notifies subscribers so a UI can redraw.
Analytics and chart projection are computed on demand from current state.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Union

from .chart.models import ChartOptions, ChartProjection, PlotSize
from .chart.projector import ChartProjector
from .config.defaults import DefaultConfig, get_default_config
from .config.loader import ConfigLoader
from .data.currency import Currency
from .data.formatting import format_amount, format_change, format_date
from .data.models import CapitalEntry, SessionState, Target
from .errors import PersistenceError, PersistenceReadError
from .logging.config import get_logger, get_store_logger, log_mutation
from .metrics.analytics import AnalyticsEngine
from .metrics.trendline import Trendline
from .persistence.codec import decode_snapshot, encode_snapshot
from .persistence.snapshot_store import (
    MemorySnapshotStore,
    PersistenceGateway,
    SqliteSnapshotStore,
)
from .store.entry_store import EntryStore
from .store.goal_tracker import GoalProgress, GoalTracker
from .utils.time import DateLike

logger = get_logger(__name__)
store_logger = get_store_logger(__name__)

CURRENCY_UPDATED = "currency_updated"
DATA_RESET = "data_reset"


@dataclass(frozen=True)
class ChangeEvent:
    """Notification sent to subscribers after a mutation."""
    kind: str
    state: SessionState


@dataclass(frozen=True)
class EntryChange:
    """Entry with its change versus the previous entry, for entry lists."""
    entry: CapitalEntry
    previous: Optional[CapitalEntry]
    change: Optional[float]
    amount_text: str
    date_text: str
    change_text: Optional[str]

    @property
    def increased(self) -> Optional[bool]:
        return None if self.change is None else self.change >= 0


Subscriber = Callable[[ChangeEvent], None]


class CapitalTracker:
    """
    Explicit session object for capital tracking.

    Mutations: upsert_entry, remove_entry, update_target, update_currency,
    reset_all_data. Each runs to completion, writes the full snapshot through
    the gateway and then notifies subscribers. A failed write is logged and
    the in-memory change stands.
    """

    def __init__(self, gateway: PersistenceGateway,
                 config: Optional[DefaultConfig] = None) -> None:
        self.config = config or get_default_config()
        self.gateway = gateway
        self.logger = logger

        self._subscribers: list[Subscriber] = []
        self._currency = self._default_currency()

        self.entry_store = EntryStore(on_change=self._on_store_change)
        self.goal_tracker = GoalTracker(
            self._default_target(), self.entry_store, on_change=self._on_store_change
        )
        self.analytics = AnalyticsEngine(self.entry_store)
        self.projector = ChartProjector(self.config.chart)

        self._restore()

    @classmethod
    def open(cls, db_path: Optional[Union[str, Path]] = None,
             config: Optional[DefaultConfig] = None,
             config_dir: Optional[Union[str, Path]] = None) -> "CapitalTracker":
        """
        Open a session backed by the SQLite snapshot store.

        Without an explicit config, settings.yaml in config_dir (the
        repository config directory by default) is merged over the defaults.
        If the database cannot be opened the session runs on an in-memory
        gateway with default state, and nothing is persisted.

        Raises:
            ConfigurationError: If settings.yaml fails validation
        """
        if config is None:
            config = ConfigLoader.create(Path(config_dir) if config_dir else None).load()
        db_path = str(db_path or config.persistence.db_path)
        try:
            gateway: PersistenceGateway = SqliteSnapshotStore(
                db_path, timeout=config.persistence.timeout_seconds
            )
        except PersistenceReadError as e:
            logger.warning(
                "Snapshot database unavailable, using memory",
                db_path=db_path,
                error=str(e)
            )
            gateway = MemorySnapshotStore()
        return cls(gateway, config)

    # --- State

    @property
    def entries(self) -> tuple[CapitalEntry, ...]:
        return self.entry_store.entries

    @property
    def target(self) -> Target:
        return self.goal_tracker.target

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def state(self) -> SessionState:
        return SessionState(entries=self.entries, target=self.target, currency=self._currency)

    @property
    def moving_average_periods(self) -> tuple[int, ...]:
        """Window sizes offered by the chart's moving average picker."""
        return self.config.moving_average.periods

    # --- Observers

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a change callback.

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # --- Mutations

    def upsert_entry(self, day: DateLike, amount: Any) -> CapitalEntry:
        """
        Record the capital for a day, replacing any entry on that day.

        Raises:
            InvalidAmountError: If amount is not a finite number
        """
        entry = CapitalEntry.create(day, amount)
        return self.entry_store.upsert(entry)

    def remove_entry(self, entry: CapitalEntry) -> bool:
        """Delete an entry; returns False if it was not in the store."""
        return self.entry_store.remove(entry)

    def update_target(self, amount: Any, day: DateLike) -> Target:
        """
        Replace the savings goal.

        Raises:
            InvalidTargetError: If amount is not a finite positive number
        """
        return self.goal_tracker.update(amount, day)

    def update_currency(self, currency: Union[str, Currency]) -> Currency:
        """
        Change the display currency. Amounts are not converted.

        Raises:
            UnknownCurrencyError: If the code is not in the catalog
        """
        resolved = Currency.from_code(currency)
        previous = self._currency
        self._currency = resolved

        log_mutation(store_logger, "update_currency", {
            "currency": resolved.value,
            "previous": previous.value,
        })
        self._on_store_change(CURRENCY_UPDATED)
        return resolved

    def reset_all_data(self) -> None:
        """Clear all entries and restore the default target and currency."""
        self.entry_store.reset()
        self.goal_tracker.reset(self._default_target())
        self._currency = self._default_currency()

        log_mutation(store_logger, "reset_all_data")
        self._on_store_change(DATA_RESET)

    # --- Queries

    def get_entry_for_date(self, day: DateLike) -> Optional[CapitalEntry]:
        return self.entry_store.get_for_date(day)

    def get_previous_entry(self, before: DateLike) -> Optional[CapitalEntry]:
        return self.entry_store.get_previous(before)

    def moving_average(self, entry: CapitalEntry, window_days: int) -> Optional[float]:
        return self.analytics.moving_average(entry, window_days)

    def trendline(self) -> Optional[Trendline]:
        return self.analytics.trendline()

    def goal_progress(self) -> Optional[GoalProgress]:
        return self.goal_tracker.summary()

    def recent_changes(self, limit: Optional[int] = None) -> list[EntryChange]:
        """Most recent entries, newest first, each with its day-over-day change."""
        if limit is None:
            limit = self.config.display.recent_entries_limit

        changes = []
        for entry in reversed(self.entries[-limit:] if limit > 0 else ()):
            previous = self.get_previous_entry(entry.date)
            change = entry.amount - previous.amount if previous is not None else None
            changes.append(EntryChange(
                entry=entry,
                previous=previous,
                change=change,
                amount_text=self.format_amount(entry.amount),
                date_text=format_date(entry.date),
                change_text=format_change(change, self._currency) if change is not None else None,
            ))
        return changes

    def project_chart(
        self,
        size: PlotSize,
        options: Optional[ChartOptions] = None,
        entries: Optional[tuple[CapitalEntry, ...]] = None,
    ) -> ChartProjection:
        """Compute chart coordinates for the current (or given) entries."""
        if options is None:
            options = ChartOptions(moving_average_window=self.config.moving_average.default_window)
        return self.projector.project(
            self.entries if entries is None else entries,
            options,
            size,
            self.target,
            self._currency,
        )

    # --- Formatting

    def format_amount(self, amount: float) -> str:
        return format_amount(amount, self._currency)

    @property
    def formatted_target_amount(self) -> str:
        return self.format_amount(self.target.amount)

    @property
    def formatted_target_date(self) -> str:
        return format_date(self.target.date)

    # --- Internals

    def _default_target(self) -> Target:
        return Target(amount=self.config.target.amount, date=self.config.target.date)

    def _default_currency(self) -> Currency:
        return Currency.from_code(self.config.currency.code)

    def _restore(self) -> None:
        """Load the stored snapshot, falling back to defaults on read failure."""
        try:
            snapshot = self.gateway.load_snapshot()
        except PersistenceReadError as e:
            self.logger.warning("Snapshot read failed, starting from defaults", error=str(e))
            return

        state = decode_snapshot(snapshot, self.config)
        self.entry_store.replace_all(state.entries)
        self.goal_tracker.reset(state.target)
        self._currency = state.currency

        self.logger.info(
            "Session restored",
            entries=len(state.entries),
            target_amount=state.target.amount,
            currency=state.currency.value,
        )

    def _on_store_change(self, kind: str) -> None:
        self._persist(kind)
        self._notify(kind)

    def _persist(self, kind: str) -> None:
        try:
            self.gateway.save_snapshot(encode_snapshot(self.state))
        except PersistenceError as e:
            self.logger.warning(
                "Snapshot write failed, keeping in-memory state",
                trigger=kind,
                error=str(e)
            )

    def _notify(self, kind: str) -> None:
        event = ChangeEvent(kind=kind, state=self.state)
        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception as e:
                self.logger.error(
                    "Subscriber failed",
                    trigger=kind,
                    subscriber=getattr(callback, "__name__", repr(callback)),
                    error=str(e)
                )
