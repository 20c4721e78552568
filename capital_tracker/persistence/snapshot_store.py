"""Snapshot persistence gateways for session state."""

import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Protocol

import orjson

from ..errors import PersistenceReadError, PersistenceWriteError
from ..logging.config import get_logger


class PersistenceGateway(Protocol):
    """Durable read/write of the full session snapshot."""

    def load_snapshot(self) -> dict[str, Any]:
        """
        Return the stored snapshot keys; missing keys are simply absent.

        Raises:
            PersistenceReadError: If storage cannot be read
        """
        ...

    def save_snapshot(self, snapshot: dict[str, Any]) -> None:
        """
        Replace the stored snapshot with the given one.

        Raises:
            PersistenceWriteError: If storage cannot be written
        """
        ...


class MemorySnapshotStore:
    """In-process gateway for tests and ephemeral sessions."""

    def __init__(self, snapshot: Optional[dict[str, Any]] = None):
        self._data = orjson.dumps(snapshot or {})
        self.save_count = 0

    def load_snapshot(self) -> dict[str, Any]:
        return orjson.loads(self._data)

    def save_snapshot(self, snapshot: dict[str, Any]) -> None:
        try:
            self._data = orjson.dumps(snapshot)
        except TypeError as e:
            raise PersistenceWriteError(f"Snapshot is not serializable: {e}", target="memory") from e
        self.save_count += 1


class SqliteSnapshotStore:
    """
    SQLite key-value snapshot store.

    One row per snapshot key, values encoded with orjson. A save rewrites
    every key inside a single transaction, so readers never see a mix of two
    snapshots.
    """

    def __init__(self, db_path: str = "capital_tracker.db", timeout: float = 30.0):
        self.db_path = Path(db_path)
        self.timeout = timeout
        self.logger = get_logger("snapshot.store")

        self._init_database()

    def _init_database(self) -> None:
        """Initialize database schema."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            with self._get_connection() as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS snapshot (
                        key TEXT PRIMARY KEY,
                        value BLOB NOT NULL,
                        updated_at TEXT NOT NULL
                    )
                """)
                conn.commit()
        except (sqlite3.Error, OSError) as e:
            raise PersistenceReadError(
                f"Cannot initialize snapshot database: {e}", target=str(self.db_path)
            ) from e

    @contextmanager
    def _get_connection(self):
        """Get database connection with proper error handling."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=self.timeout)
            conn.row_factory = sqlite3.Row
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            self.logger.error("Database error", db_path=str(self.db_path), error=str(e))
            raise
        finally:
            if conn:
                conn.close()

    def load_snapshot(self) -> dict[str, Any]:
        """
        Read every stored key.

        A value that cannot be decoded is dropped with a warning so that only
        that field falls back to its default.

        Raises:
            PersistenceReadError: If the database cannot be queried
        """
        try:
            with self._get_connection() as conn:
                rows = conn.execute("SELECT key, value FROM snapshot").fetchall()
        except sqlite3.Error as e:
            raise PersistenceReadError(
                f"Failed to load snapshot: {e}", target=str(self.db_path)
            ) from e

        snapshot = {}
        for row in rows:
            try:
                snapshot[row["key"]] = orjson.loads(row["value"])
            except orjson.JSONDecodeError as e:
                self.logger.warning(
                    "Undecodable snapshot value skipped",
                    key=row["key"],
                    error=str(e)
                )

        self.logger.debug("Snapshot loaded", keys=sorted(snapshot))
        return snapshot

    def save_snapshot(self, snapshot: dict[str, Any]) -> None:
        """
        Replace the stored snapshot.

        Raises:
            PersistenceWriteError: If encoding or the transaction fails
        """
        now = datetime.now(timezone.utc).isoformat()
        try:
            rows = [(key, orjson.dumps(value), now) for key, value in snapshot.items()]
        except TypeError as e:
            raise PersistenceWriteError(
                f"Snapshot is not serializable: {e}", target=str(self.db_path)
            ) from e

        try:
            with self._get_connection() as conn:
                conn.execute("DELETE FROM snapshot")
                conn.executemany(
                    "INSERT INTO snapshot (key, value, updated_at) VALUES (?, ?, ?)",
                    rows
                )
                conn.commit()
        except sqlite3.Error as e:
            raise PersistenceWriteError(
                f"Failed to save snapshot: {e}", target=str(self.db_path)
            ) from e

        self.logger.debug("Snapshot saved", keys=len(rows), db_path=str(self.db_path))

