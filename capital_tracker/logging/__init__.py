"""
Logging configuration and utilities for the capital tracker.
"""
from .config import configure_logging, get_logger, get_store_logger, log_mutation

__all__ = ["configure_logging", "get_logger", "get_store_logger", "log_mutation"]
