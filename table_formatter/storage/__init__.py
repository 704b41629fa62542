"""Saved table storage."""

from .snapshot_store import InMemorySnapshotStore, JsonFileSnapshotStore, SnapshotStore

__all__ = [
    "SnapshotStore",
    "InMemorySnapshotStore",
    "JsonFileSnapshotStore",
]
