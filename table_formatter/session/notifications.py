#!/usr/bin/env python3
"""
NotificationChannel: user-facing event buffer for the formatter session.

Captures success, error and info messages (including undo-able events)
so they can be shown by a CLI, a UI, or inspected by tests.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

SUCCESS = "success"
ERROR = "error"
INFO = "info"


@dataclass(frozen=True)
class Notification:
    """
    A single user-facing message.

    Attributes:
        level: One of "success", "error", "info"
        message: Short headline
        description: Optional detail line
        undoable: Whether an undo action is pending for this event
    """
    level: str
    message: str
    description: Optional[str] = None
    undoable: bool = False


class NotificationChannel:
    """
    Output buffer for session events.

    Every notification is kept in history, logged, and forwarded to any
    registered listeners.
    """

    def __init__(self, listeners: Optional[List[Callable[[Notification], None]]] = None):
        self.history: List[Notification] = []
        self.listeners: List[Callable[[Notification], None]] = list(listeners or [])

    def subscribe(self, listener: Callable[[Notification], None]) -> None:
        self.listeners.append(listener)

    def success(self, message: str, description: Optional[str] = None) -> Notification:
        return self._publish(Notification(SUCCESS, message, description))

    def error(self, message: str, description: Optional[str] = None) -> Notification:
        return self._publish(Notification(ERROR, message, description))

    def info(self, message: str, description: Optional[str] = None, undoable: bool = False) -> Notification:
        return self._publish(Notification(INFO, message, description, undoable))

    @property
    def latest(self) -> Optional[Notification]:
        """Most recent notification, if any."""
        return self.history[-1] if self.history else None

    def clear(self) -> None:
        self.history.clear()

    def _publish(self, notification: Notification) -> Notification:
        self.history.append(notification)

        text = notification.message
        if notification.description:
            text = f"{text} {notification.description}"
        if notification.level == ERROR:
            logger.error(text)
        else:
            logger.info(text)

        for listener in self.listeners:
            listener(notification)
        return notification
