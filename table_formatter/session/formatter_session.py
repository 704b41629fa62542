#!/usr/bin/env python3
"""
FormatterSession - editor state around the formatting pipeline.

Tracks the current input, output and settings, reformats on every change,
and manages saved tables with clear/delete undo. Errors from the input
boundary and the snapshot store are reported as notifications rather
than raised.
"""

import dataclasses
import logging
from typing import List, Optional

from ..exceptions import (
    DuplicateNameError,
    InputTooLongError,
    PersistenceError,
    SnapshotNotFoundError,
)
from ..formatting.data_models import FormatConfig, SavedSnapshot
from ..formatting.table_formatter import TableFormatter
from ..storage.snapshot_store import InMemorySnapshotStore, SnapshotStore
from ..utils.config import get_default_format_config, get_undo_window_seconds
from .notifications import NotificationChannel
from .undo import UndoBuffer

logger = logging.getLogger(__name__)


class FormatterSession:
    """
    Stateful controller for one editing session.

    Responsibilities:
    - Validate and store input, keep output in sync with input and settings
    - Clear input with undo
    - Save, list, restore and delete named tables through an injected store
    - Report outcomes on a NotificationChannel
    """

    def __init__(
        self,
        store: Optional[SnapshotStore] = None,
        config: Optional[FormatConfig] = None,
        formatter: Optional[TableFormatter] = None,
        undo_buffer: Optional[UndoBuffer] = None,
        notifications: Optional[NotificationChannel] = None
    ):
        """
        Initialize session.

        Args:
            store: Saved table store (default: InMemorySnapshotStore())
            config: Initial settings (default: from environment)
            formatter: Pipeline orchestrator (default: TableFormatter())
            undo_buffer: Undo slot (default: window from environment)
            notifications: Event channel (default: new channel)
        """
        self.store = store if store is not None else InMemorySnapshotStore()
        self.config = config or get_default_format_config()
        self.formatter = formatter or TableFormatter()
        self.undo_buffer = undo_buffer or UndoBuffer(get_undo_window_seconds())
        self.notifications = notifications or NotificationChannel()

        self.input = ""
        self.output = ""
        self.input_error: Optional[str] = None

    def set_input(self, text: str) -> bool:
        """
        Replace the input and reformat.

        Input longer than the limit is rejected: input_error is set and the
        previous input and output are kept.

        Returns:
            True if the input was accepted
        """
        try:
            self.formatter.validate_input(text)
        except InputTooLongError as e:
            self.input_error = str(e)
            return False

        self.input_error = None
        self.input = text
        self._reformat()
        return True

    def update_config(self, **changes) -> FormatConfig:
        """
        Change settings and reformat the current input.

        Args:
            **changes: FormatConfig fields to replace

        Returns:
            The new FormatConfig

        Raises:
            ValueError: If a changed value is invalid (settings stay unchanged)
        """
        self.config = dataclasses.replace(self.config, **changes)
        self._reformat()
        return self.config

    def set_show_line_numbers(self, enabled: bool) -> None:
        self.update_config(show_line_numbers=enabled is True)

    def clear_input(self) -> None:
        """Clear input and output; the previous values can be restored with undo()."""
        previous_input, previous_output = self.input, self.output

        self.input = ""
        self.output = ""
        self.input_error = None

        def restore():
            self.input = previous_input
            self.output = previous_output
            self.notifications.success("Input restored!")

        self.undo_buffer.push("clear input", restore)
        self.notifications.info("Input cleared!", "Your input has been cleared.", undoable=True)

    def save_snapshot(self, name: str) -> Optional[SavedSnapshot]:
        """
        Save the current input, output and settings under a name.

        Args:
            name: Table name, unique ignoring case

        Returns:
            The saved snapshot, or None if saving failed (see notifications)
        """
        if not self.output.strip():
            self.notifications.error("Nothing to save!")
            return None

        if not name or not name.strip():
            self.notifications.error("Please enter a name for this table")
            return None

        snapshot = SavedSnapshot(
            name=name.strip(),
            input=self.input,
            output=self.output,
            config=self.config,
        )

        try:
            self.store.insert(snapshot)
        except DuplicateNameError as e:
            self.notifications.error(str(e))
            return None
        except PersistenceError as e:
            logger.error(f"Error saving table '{snapshot.name}': {e}")
            self.notifications.error("Failed to save tables to storage")
            return None

        self.notifications.success("Table saved successfully!")
        return snapshot

    def list_snapshots(self) -> List[SavedSnapshot]:
        """Saved tables in insertion order (empty if the store cannot be read)."""
        try:
            return self.store.list()
        except PersistenceError as e:
            logger.error(f"Error loading saved tables: {e}")
            self.notifications.error("Failed to load saved tables")
            return []

    def restore_snapshot(self, snapshot_id: str, apply_saved_config: bool = False) -> bool:
        """
        Load a saved table's input into the session.

        The output is re-rendered with the current settings, or with the
        settings stored in the snapshot when apply_saved_config is True.

        Returns:
            True if the table was restored
        """
        try:
            snapshot = self.store.get(snapshot_id)
        except (SnapshotNotFoundError, PersistenceError) as e:
            self.notifications.error(f"Failed to restore table: {e}")
            return False

        if apply_saved_config:
            self.config = snapshot.config

        self.input = snapshot.input
        self.input_error = None
        self._reformat()

        self.notifications.success(f"Restored table: {snapshot.name}")
        return True

    def delete_snapshot(self, snapshot_id: str) -> Optional[SavedSnapshot]:
        """
        Delete a saved table; it can be put back with undo().

        Returns:
            The deleted snapshot, or None if deletion failed
        """
        try:
            deleted = self.store.delete(snapshot_id)
        except SnapshotNotFoundError as e:
            self.notifications.error(str(e))
            return None
        except PersistenceError as e:
            logger.error(f"Error deleting table {snapshot_id}: {e}")
            self.notifications.error("Failed to save tables to storage")
            return None

        def restore():
            try:
                self.store.insert(deleted)
            except (DuplicateNameError, PersistenceError) as e:
                self.notifications.error(f"Failed to restore {deleted.name}: {e}")
                return
            self.notifications.success(f"Restored: {deleted.name}")

        self.undo_buffer.push(f"delete {deleted.name}", restore)
        self.notifications.info(
            "Table deleted!", f'"{deleted.name}" has been removed.', undoable=True
        )
        return deleted

    def undo(self) -> bool:
        """Revert the most recent clear or delete if still within the undo window."""
        return self.undo_buffer.undo()

    def _reformat(self) -> None:
        # Input was validated on entry; extraction and rendering cannot fail
        table = self.formatter.extract(self.input, self.config)
        self.output = self.formatter.render(table, self.config.show_line_numbers, self.config.output_format)
