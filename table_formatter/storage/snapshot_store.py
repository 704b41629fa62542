#!/usr/bin/env python3
"""
Snapshot stores for saved tables.

SnapshotStore is the injected list/insert/delete capability used by the
formatter session. Two backends are provided: an in-memory list and a
JSON file guarded with fcntl locks.
"""

import fcntl
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from ..exceptions import DuplicateNameError, PersistenceError, SnapshotNotFoundError
from ..formatting.data_models import SavedSnapshot

logger = logging.getLogger(__name__)


class SnapshotStore(ABC):
    """
    Base store for saved tables.

    Subclasses provide _load() and _save(); this class implements the
    lookup, uniqueness and deletion rules on top of them.
    """

    @abstractmethod
    def _load(self) -> List[SavedSnapshot]:
        """Return all snapshots in insertion order."""

    @abstractmethod
    def _save(self, snapshots: List[SavedSnapshot]) -> None:
        """Replace all stored snapshots."""

    def list(self) -> List[SavedSnapshot]:
        """
        Get all saved snapshots.

        Returns:
            Snapshots in insertion order

        Raises:
            PersistenceError: If the backing store cannot be read
        """
        return list(self._load())

    def get(self, snapshot_id: str) -> SavedSnapshot:
        """
        Get a snapshot by id.

        Raises:
            SnapshotNotFoundError: If no snapshot has this id
        """
        for snapshot in self._load():
            if snapshot.id == snapshot_id:
                return snapshot
        raise SnapshotNotFoundError(snapshot_id)

    def find_by_name(self, name: str) -> Optional[SavedSnapshot]:
        """Case-insensitive lookup by name."""
        wanted = name.strip().lower()
        for snapshot in self._load():
            if snapshot.name.strip().lower() == wanted:
                return snapshot
        return None

    def insert(self, snapshot: SavedSnapshot) -> SavedSnapshot:
        """
        Append a snapshot.

        Args:
            snapshot: Snapshot to store

        Returns:
            The stored snapshot

        Raises:
            DuplicateNameError: If a snapshot with the same name exists (ignoring case)
            PersistenceError: If the backing store cannot be written
        """
        snapshots = self._load()
        wanted = snapshot.name.strip().lower()
        if any(existing.name.strip().lower() == wanted for existing in snapshots):
            raise DuplicateNameError(snapshot.name)

        self._save(snapshots + [snapshot])
        logger.info(f"Saved table '{snapshot.name}' ({snapshot.id})")
        return snapshot

    def delete(self, snapshot_id: str) -> SavedSnapshot:
        """
        Remove a snapshot.

        Args:
            snapshot_id: Id of the snapshot to remove

        Returns:
            The removed snapshot

        Raises:
            SnapshotNotFoundError: If no snapshot has this id
            PersistenceError: If the backing store cannot be written
        """
        snapshots = self._load()
        remaining = [snapshot for snapshot in snapshots if snapshot.id != snapshot_id]
        if len(remaining) == len(snapshots):
            raise SnapshotNotFoundError(snapshot_id)

        removed = next(snapshot for snapshot in snapshots if snapshot.id == snapshot_id)
        self._save(remaining)
        logger.info(f"Deleted table '{removed.name}' ({removed.id})")
        return removed


class InMemorySnapshotStore(SnapshotStore):
    """List-backed store; nothing outlives the process."""

    def __init__(self, snapshots: Optional[List[SavedSnapshot]] = None):
        self._snapshots: List[SavedSnapshot] = list(snapshots or [])

    def _load(self) -> List[SavedSnapshot]:
        return list(self._snapshots)

    def _save(self, snapshots: List[SavedSnapshot]) -> None:
        self._snapshots = list(snapshots)


class JsonFileSnapshotStore(SnapshotStore):
    """
    Stores snapshots as a JSON array in a single file.

    Reads take a shared fcntl lock and writes an exclusive one. Writes go
    to a temporary file that replaces the target, so a failed write leaves
    the previous contents intact.
    """

    def __init__(self, path: str | Path):
        """
        Initialize store.

        Args:
            path: JSON file location (created on first save)
        """
        self.path = Path(path)
        self.lock_path = self.path.with_name(self.path.name + ".lock")

    def _load(self) -> List[SavedSnapshot]:
        if not self.path.exists():
            return []

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_SH)
                try:
                    records = json.load(f)
                finally:
                    fcntl.flock(f.fileno(), fcntl.LOCK_UN)

            if not isinstance(records, list):
                raise ValueError("expected a JSON array of saved tables")
            return [SavedSnapshot.from_dict(record) for record in records]

        except (OSError, ValueError) as e:
            logger.error(f"Error loading saved tables from {self.path}: {e}")
            raise PersistenceError(f"Failed to load saved tables: {e}")

    def _save(self, snapshots: List[SavedSnapshot]) -> None:
        records = [snapshot.to_dict() for snapshot in snapshots]

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.lock_path, 'w') as lock_file:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
                try:
                    fd, tmp_name = tempfile.mkstemp(
                        dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
                    )
                    try:
                        with os.fdopen(fd, 'w', encoding='utf-8') as f:
                            json.dump(records, f, indent=2, ensure_ascii=False)
                            f.flush()
                            os.fsync(f.fileno())  # Force write to disk
                        os.replace(tmp_name, self.path)
                    except BaseException:
                        if os.path.exists(tmp_name):
                            os.unlink(tmp_name)
                        raise
                finally:
                    fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)

        except OSError as e:
            logger.error(f"Error saving tables to {self.path}: {e}")
            raise PersistenceError(f"Failed to save tables to storage: {e}")
