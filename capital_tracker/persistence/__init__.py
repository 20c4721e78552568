"""
Persistence module.

Snapshot codec and the gateways that store the session snapshot durably.
"""
from .codec import decode_snapshot, encode_snapshot
from .snapshot_store import MemorySnapshotStore, PersistenceGateway, SqliteSnapshotStore

__all__ = [
    "PersistenceGateway",
    "MemorySnapshotStore",
    "SqliteSnapshotStore",
    "decode_snapshot",
    "encode_snapshot",
]
