"""Editor session state, undo and notifications."""

from .formatter_session import FormatterSession
from .notifications import Notification, NotificationChannel
from .undo import UndoAction, UndoBuffer

__all__ = [
    "FormatterSession",
    "Notification",
    "NotificationChannel",
    "UndoAction",
    "UndoBuffer",
]
