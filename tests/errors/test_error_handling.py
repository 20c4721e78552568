"""
Error handling tests for the capital tracker.

Tests cover error classification, rejected input and recovery from
persistence failures.
"""

import pytest
from datetime import date
from unittest.mock import Mock

from capital_tracker.errors import (
    DataQualityError,
    InvalidAmountError,
    InvalidTargetError,
    InvalidWindowError,
    UnknownCurrencyError,
    MalformedSnapshotError,
    SystemFailureError,
    ConfigurationError,
    PersistenceError,
    PersistenceReadError,
    PersistenceWriteError,
)
from capital_tracker.persistence.snapshot_store import MemorySnapshotStore
from capital_tracker.session import CapitalTracker


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        """Test that data quality errors have proper hierarchy."""
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        amount_error = InvalidAmountError("bad amount", amount="abc")
        assert isinstance(amount_error, DataQualityError)
        assert amount_error.amount == "abc"

        target_error = InvalidTargetError("bad target", amount=-1)
        assert target_error.amount == -1

        window_error = InvalidWindowError("bad window", window=0)
        assert window_error.window == 0

        currency_error = UnknownCurrencyError("bad code", code="XYZ")
        assert currency_error.code == "XYZ"

        snapshot_error = MalformedSnapshotError("bad field", key="targetAmount", raw_value="x")
        assert snapshot_error.key == "targetAmount"
        assert snapshot_error.raw_value == "x"

    def test_system_failure_error_hierarchy(self):
        """Test that system failure errors have proper hierarchy."""
        config_error = ConfigurationError("invalid", errors=["a"])
        assert config_error.recoverable is False
        assert config_error.errors == ["a"]

        read_error = PersistenceReadError("cannot read", target="capital.db")
        assert isinstance(read_error, PersistenceError)
        assert isinstance(read_error, SystemFailureError)
        assert read_error.operation == "read"
        assert read_error.target == "capital.db"

        write_error = PersistenceWriteError("cannot write")
        assert write_error.operation == "write"

    def test_error_context(self):
        """Test that errors carry context."""
        context = {"entry_id": "abc", "field": "amount"}
        error = InvalidAmountError("bad", amount=None, context=context)

        assert error.context == context
        assert str(error) == "bad"

    def test_categories_are_disjoint(self):
        """Test input errors are never treated as system failures."""
        assert not issubclass(DataQualityError, SystemFailureError)
        assert not issubclass(SystemFailureError, DataQualityError)


class TestPersistenceRecovery:
    """Test that persistence failures never reach the caller."""

    def test_intermittent_write_failures(self):
        """Test the next successful write stores the complete state."""
        inner = MemorySnapshotStore()
        gateway = Mock(wraps=inner)
        gateway.save_snapshot.side_effect = [
            PersistenceWriteError("busy"),
            None,
        ]
        tracker = CapitalTracker(gateway)

        tracker.upsert_entry(date(2026, 1, 1), 10)
        tracker.upsert_entry(date(2026, 1, 2), 20)

        assert len(tracker.entries) == 2
        assert gateway.save_snapshot.call_count == 2
        saved = gateway.save_snapshot.call_args.args[0]
        assert len(saved["entries"]) == 2

    def test_malformed_stored_fields_recover_individually(self):
        """Test a corrupt field falls back while valid fields load."""
        gateway = MemorySnapshotStore({
            "entries": "garbage",
            "targetAmount": 750.0,
            "targetDate": None,
            "currency": "usd",
        })

        tracker = CapitalTracker(gateway)

        assert tracker.entries == ()
        assert tracker.target.amount == 750.0
        assert tracker.target.date == date(2026, 4, 1)
        assert tracker.currency.value == "USD"

    def test_rejected_input_does_not_persist(self):
        """Test invalid values are raised before any write."""
        gateway = MemorySnapshotStore()
        tracker = CapitalTracker(gateway)

        with pytest.raises(DataQualityError):
            tracker.upsert_entry(date(2026, 1, 1), float("nan"))

        assert gateway.save_count == 0
