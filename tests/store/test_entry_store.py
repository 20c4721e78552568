"""Tests for the capital entry store."""

import dataclasses
import math
import pytest
from datetime import date, datetime, timedelta
from unittest.mock import Mock

from capital_tracker.data.models import CapitalEntry
from capital_tracker.errors import InvalidAmountError
from capital_tracker.store.entry_store import ENTRY_REMOVED, ENTRY_UPSERTED, EntryStore


class TestUpsert:
    """Test insert-or-replace by calendar day."""

    def test_upsert_into_empty_store(self):
        """Test a first entry is stored."""
        store = EntryStore()
        entry = CapitalEntry.create(date(2026, 1, 1), 100)

        store.upsert(entry)

        assert store.entries == (entry,)

    def test_same_day_keeps_later_amount(self):
        """Test two upserts on one day leave only the later value."""
        store = EntryStore()
        store.upsert(CapitalEntry.create(date(2026, 1, 1), 100))
        store.upsert(CapitalEntry.create(date(2026, 1, 1), 250))

        assert len(store) == 1
        assert store.entries[0].amount == 250

    def test_same_day_replacement_uses_day_not_id(self):
        """Test entries with different ids still collide on the same day."""
        store = EntryStore()
        first = CapitalEntry.create(date(2026, 1, 1), 100)
        second = CapitalEntry.create(datetime(2026, 1, 1, 18, 30), 200)

        store.upsert(first)
        store.upsert(second)

        assert first.id != second.id
        assert [e.id for e in store] == [second.id]

    def test_out_of_order_upserts_are_sorted(self):
        """Test the sequence is ascending by date after any insert order."""
        store = EntryStore()
        for day in (5, 1, 3, 2, 4):
            store.upsert(CapitalEntry.create(date(2026, 1, day), day * 10))

        dates = [e.date for e in store]
        assert dates == sorted(dates)
        assert all(a < b for a, b in zip(dates, dates[1:]))

    def test_datetime_entry_is_normalized_to_day(self):
        """Test an entry built directly with a datetime is stored as a day."""
        store = EntryStore()
        stored = store.upsert(CapitalEntry(date=datetime(2026, 2, 3, 9, 15), amount=10.0))

        assert stored.date == date(2026, 2, 3)
        assert store.get_for_date(date(2026, 2, 3)) is stored

    @pytest.mark.parametrize("amount", [math.nan, math.inf, -math.inf])
    def test_non_finite_amount_rejected(self, amount):
        """Test NaN and infinities are rejected without changing state."""
        store = EntryStore([CapitalEntry.create(date(2026, 1, 1), 100)])
        before = store.entries

        with pytest.raises(InvalidAmountError):
            store.upsert(CapitalEntry(date=date(2026, 1, 1), amount=amount))

        assert store.entries == before

    def test_upsert_notifies_listener(self):
        """Test the change listener is called once per upsert."""
        listener = Mock()
        store = EntryStore(on_change=listener)

        store.upsert(CapitalEntry.create(date(2026, 1, 1), 1))

        listener.assert_called_once_with(ENTRY_UPSERTED)

    def test_rejected_upsert_does_not_notify(self):
        """Test a rejected upsert never reaches the listener."""
        listener = Mock()
        store = EntryStore(on_change=listener)

        with pytest.raises(InvalidAmountError):
            store.upsert(CapitalEntry(date=date(2026, 1, 1), amount=math.nan))

        listener.assert_not_called()

    @pytest.mark.parametrize("amount", ["abc", None, [1]])
    def test_non_numeric_amount_rejected(self, amount):
        """Test an entry built directly with a bad amount raises a data quality error."""
        store = EntryStore()

        with pytest.raises(InvalidAmountError):
            store.upsert(CapitalEntry(date=date(2026, 1, 1), amount=amount))

        assert len(store) == 0

    def test_numeric_text_amount_is_coerced(self):
        """Test a textual amount is stored as a float."""
        store = EntryStore()
        stored = store.upsert(CapitalEntry(date=date(2026, 1, 1), amount="12,5"))

        assert stored.amount == 12.5
        assert store.amounts() == [12.5]

    def test_same_id_on_other_day_is_moved(self):
        """Test re-dating an entry keeps a single copy of its id."""
        store = EntryStore()
        original = store.upsert(CapitalEntry.create(date(2026, 1, 1), 100))
        other = store.upsert(CapitalEntry.create(date(2026, 1, 5), 300))

        moved = store.upsert(dataclasses.replace(original, date=date(2026, 1, 3)))

        assert [e.id for e in store] == [original.id, other.id]
        assert store.get_for_date(date(2026, 1, 1)) is None
        assert store.position_of(moved) == 0

        assert store.remove(moved) is True
        assert store.entries == (other,)


class TestLookup:
    """Test day lookups."""

    def test_get_for_date_matches_calendar_day(self, entry_store, start_day):
        """Test lookup ignores time of day."""
        store = entry_store([100, 200, 300])

        found = store.get_for_date(datetime.combine(start_day + timedelta(days=1), datetime.max.time()))

        assert found is not None
        assert found.amount == 200

    def test_get_for_date_not_found(self, entry_store):
        """Test lookup returns None for a day without an entry."""
        store = entry_store([100])
        assert store.get_for_date(date(2030, 1, 1)) is None

    def test_get_previous_returns_latest_earlier_entry(self):
        """Test previous entry lookup across a gap."""
        store = EntryStore([
            CapitalEntry.create(date(2026, 1, 1), 100),
            CapitalEntry.create(date(2026, 1, 5), 200),
        ])

        previous = store.get_previous(date(2026, 1, 10))

        assert previous is not None
        assert previous.date == date(2026, 1, 5)
        assert previous.amount == 200

    def test_get_previous_is_strict(self):
        """Test an entry on the given day is not its own predecessor."""
        store = EntryStore([
            CapitalEntry.create(date(2026, 1, 1), 100),
            CapitalEntry.create(date(2026, 1, 5), 200),
        ])

        assert store.get_previous(date(2026, 1, 1)) is None
        assert store.get_previous(date(2026, 1, 5)).amount == 100

    def test_get_previous_empty_store(self):
        """Test previous lookup on an empty store."""
        assert EntryStore().get_previous(date(2026, 1, 1)) is None

    def test_position_of(self, entry_store):
        """Test positions are zero-based and matched by id."""
        store = entry_store([1, 2, 3])
        entries = store.entries

        assert store.position_of(entries[2]) == 2
        assert store.position_of(CapitalEntry.create(date(2026, 1, 1), 1)) is None

    def test_latest(self, entry_store):
        """Test latest is the chronologically last entry."""
        assert EntryStore().latest() is None
        assert entry_store([5, 7, 9]).latest().amount == 9


class TestRemoveAndReset:
    """Test removal and reset."""

    def test_remove_by_identity(self, entry_store):
        """Test removing an entry keeps the others in order."""
        store = entry_store([10, 20, 30])
        middle = store.entries[1]

        assert store.remove(middle) is True
        assert [e.amount for e in store] == [10, 30]

    def test_remove_notifies_listener(self, entry_store):
        """Test removal triggers the change listener."""
        store = entry_store([10])
        store.on_change = Mock()

        store.remove(store.entries[0])

        store.on_change.assert_called_once_with(ENTRY_REMOVED)

    def test_remove_unknown_entry_is_noop(self, entry_store):
        """Test removing a stale entry changes nothing and does not notify."""
        store = entry_store([10, 20])
        store.on_change = Mock()

        assert store.remove(CapitalEntry.create(date(2026, 1, 1), 10)) is False
        assert len(store) == 2
        store.on_change.assert_not_called()

    def test_reset_clears_entries(self, entry_store):
        """Test reset empties the store."""
        store = entry_store([1, 2, 3])
        store.reset()
        assert len(store) == 0
        assert not store


class TestReplaceAll:
    """Test bulk loading used for snapshot restore."""

    def test_replace_all_sorts_and_dedupes(self):
        """Test loaded entries respect the store invariants."""
        store = EntryStore()
        store.replace_all([
            CapitalEntry.create(date(2026, 1, 3), 30),
            CapitalEntry.create(date(2026, 1, 1), 10),
            CapitalEntry.create(date(2026, 1, 3), 35),
        ])

        assert [(e.date.day, e.amount) for e in store] == [(1, 10), (3, 35)]

    def test_replace_all_dedupes_ids(self):
        """Test a duplicated id across days keeps only the later entry."""
        store = EntryStore()
        store.replace_all([
            CapitalEntry.create(date(2026, 1, 1), 10, entry_id="dup"),
            CapitalEntry.create(date(2026, 1, 2), 20, entry_id="keep"),
            CapitalEntry.create(date(2026, 1, 4), 40, entry_id="dup"),
        ])

        assert [(e.id, e.amount) for e in store] == [("keep", 20), ("dup", 40)]

        store.remove(store.entries[1])
        assert [e.id for e in store] == ["keep"]

    def test_replace_all_does_not_notify(self):
        """Test restore does not trigger a write."""
        listener = Mock()
        store = EntryStore(on_change=listener)

        store.replace_all([CapitalEntry.create(date(2026, 1, 1), 10)])

        listener.assert_not_called()

    def test_entries_is_a_copy(self, entry_store):
        """Test callers cannot mutate the store through the accessor."""
        store = entry_store([1, 2])
        entries = store.entries
        assert isinstance(entries, tuple)
        assert store.amounts() == [1.0, 2.0]
