"""
Error classification for the capital tracker.

Data quality errors reject a single mutation and leave state untouched;
system failures come from the persistence boundary and are recovered or
logged by the session.
"""

from .data_quality import (
    DataQualityError,
    InvalidAmountError,
    InvalidTargetError,
    InvalidWindowError,
    UnknownCurrencyError,
    MalformedSnapshotError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
    PersistenceError,
    PersistenceReadError,
    PersistenceWriteError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "InvalidAmountError",
    "InvalidTargetError",
    "InvalidWindowError",
    "UnknownCurrencyError",
    "MalformedSnapshotError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
    "PersistenceError",
    "PersistenceReadError",
    "PersistenceWriteError",
]
