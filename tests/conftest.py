"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date, timedelta
from typing import Callable, Sequence

from capital_tracker.data.models import CapitalEntry
from capital_tracker.persistence.snapshot_store import MemorySnapshotStore
from capital_tracker.session import CapitalTracker
from capital_tracker.store.entry_store import EntryStore


@pytest.fixture
def start_day() -> date:
    """First day of generated entry sequences."""
    return date(2026, 1, 1)


@pytest.fixture
def make_entries(start_day) -> Callable[..., list[CapitalEntry]]:
    """Factory for ascending entries, one per step starting at start_day."""
    def _make(amounts: Sequence[float], step_days: int = 1) -> list[CapitalEntry]:
        return [
            CapitalEntry.create(start_day + timedelta(days=i * step_days), amount)
            for i, amount in enumerate(amounts)
        ]
    return _make


@pytest.fixture
def entry_store(make_entries) -> Callable[[Sequence[float]], EntryStore]:
    """Factory for a store pre-filled with daily entries."""
    def _make(amounts: Sequence[float]) -> EntryStore:
        return EntryStore(make_entries(amounts))
    return _make


@pytest.fixture
def memory_gateway() -> MemorySnapshotStore:
    """Empty in-memory snapshot gateway."""
    return MemorySnapshotStore()


@pytest.fixture
def tracker(memory_gateway) -> CapitalTracker:
    """Session on an empty in-memory gateway."""
    return CapitalTracker(memory_gateway)
