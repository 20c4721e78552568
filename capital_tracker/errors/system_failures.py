"""
System failure error classifications.

Persistence failures never propagate out of the session: a failed read falls
back to default state and a failed write is logged while the in-memory
mutation stands.
"""

from typing import Any, Dict, Optional


class SystemFailureError(Exception):
    """Base class for failures outside the caller's control."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(SystemFailureError):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class PersistenceError(SystemFailureError):
    """Database or file system persistence failures."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.target = target


class PersistenceReadError(PersistenceError):
    """Snapshot could not be loaded from storage."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("operation", "read")
        super().__init__(message, **kwargs)


class PersistenceWriteError(PersistenceError):
    """Snapshot could not be written to storage."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("operation", "write")
        super().__init__(message, **kwargs)
