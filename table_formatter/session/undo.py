"""
Single-slot undo buffer.

Holds the most recent undo-able action (clearing the input, deleting a
saved table) for a limited time window.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass
class UndoAction:
    """
    A pending restore operation.

    Attributes:
        label: What the action restores (for logs and messages)
        restore: Callable that reverts the change
        expires_at: Clock reading after which the action is discarded
    """
    label: str
    restore: Callable[[], None]
    expires_at: float


class UndoBuffer:
    """Keeps at most one undo action; pushing replaces the previous one."""

    def __init__(self, window_seconds: float = 5.0, clock: Callable[[], float] = time.monotonic):
        """
        Initialize buffer.

        Args:
            window_seconds: How long an action stays available
            clock: Monotonic time source (injectable for tests)
        """
        if window_seconds < 0:
            raise ValueError(f"window_seconds must be >= 0, got {window_seconds}")
        self.window_seconds = window_seconds
        self.clock = clock
        self._action: Optional[UndoAction] = None

    def push(self, label: str, restore: Callable[[], None]) -> UndoAction:
        """Register a new undo action, discarding any previous one."""
        self._action = UndoAction(label, restore, self.clock() + self.window_seconds)
        logger.debug(f"Undo available for '{label}' ({self.window_seconds}s)")
        return self._action

    @property
    def pending(self) -> Optional[UndoAction]:
        """The live action, or None if there is none or it has expired."""
        if self._action is not None and self.clock() > self._action.expires_at:
            logger.debug(f"Undo window for '{self._action.label}' expired")
            self._action = None
        return self._action

    def undo(self) -> bool:
        """
        Run the pending action.

        Returns:
            True if an action ran, False if none was available
        """
        action = self.pending
        if action is None:
            return False

        self._action = None
        action.restore()
        logger.debug(f"Undid '{action.label}'")
        return True
