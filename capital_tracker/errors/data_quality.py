"""
Data quality error classifications for entry and target input.

These exceptions are raised synchronously to the caller; the mutation that
triggered them is rejected without touching in-memory state.
"""

from typing import Any, Dict, Optional


class DataQualityError(Exception):
    """Base class for input issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidAmountError(DataQualityError):
    """Entry amount is non-finite or could not be parsed."""

    def __init__(self, message: str, amount: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.amount = amount


class InvalidTargetError(DataQualityError):
    """Target amount is not a finite positive number."""

    def __init__(self, message: str, amount: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.amount = amount


class InvalidWindowError(DataQualityError):
    """Moving average window is smaller than one entry."""

    def __init__(self, message: str, window: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.window = window


class UnknownCurrencyError(DataQualityError):
    """Currency code is not in the catalog."""

    def __init__(self, message: str, code: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.code = code


class MalformedSnapshotError(DataQualityError):
    """Persisted snapshot field exists but cannot be decoded."""

    def __init__(self, message: str, key: Optional[str] = None,
                 raw_value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.key = key
        self.raw_value = raw_value
