#!/usr/bin/env python3
"""Unit tests for UndoBuffer and NotificationChannel."""

import logging
import pytest
from table_formatter.session.notifications import Notification, NotificationChannel
from table_formatter.session.undo import UndoBuffer


class FakeClock:
    """Manually advanced time source."""

    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


class TestUndoBuffer:
    """Test single-slot undo with expiry."""

    @pytest.fixture
    def clock(self):
        return FakeClock()

    def test_nothing_to_undo(self, clock):
        """Should report that there is nothing to undo."""
        buffer = UndoBuffer(window_seconds=5, clock=clock)
        assert buffer.pending is None
        assert buffer.undo() is False

    def test_undo_runs_action_once(self, clock):
        """Should run an action only once."""
        calls = []
        buffer = UndoBuffer(window_seconds=5, clock=clock)
        buffer.push("clear input", lambda: calls.append("restored"))

        assert buffer.undo() is True
        assert buffer.undo() is False
        assert calls == ["restored"]

    def test_undo_within_window(self, clock):
        """Should allow undo right at the end of the window."""
        calls = []
        buffer = UndoBuffer(window_seconds=5, clock=clock)
        buffer.push("clear input", lambda: calls.append(1))
        clock.now += 5
        assert buffer.undo() is True

    def test_expired_action_dropped(self, clock):
        """Should drop an action once the window has passed."""
        calls = []
        buffer = UndoBuffer(window_seconds=5, clock=clock)
        buffer.push("clear input", lambda: calls.append(1))
        clock.now += 5.01

        assert buffer.pending is None
        assert buffer.undo() is False
        assert calls == []

    def test_push_replaces_previous(self, clock):
        """Should keep only the most recent action."""
        calls = []
        buffer = UndoBuffer(window_seconds=5, clock=clock)
        buffer.push("first", lambda: calls.append("first"))
        buffer.push("second", lambda: calls.append("second"))

        assert buffer.pending.label == "second"
        buffer.undo()
        assert calls == ["second"]

    def test_negative_window(self):
        """Should reject a negative window."""
        with pytest.raises(ValueError, match="window_seconds must be >= 0"):
            UndoBuffer(window_seconds=-1)


class TestNotificationChannel:
    """Test notification history, listeners and logging."""

    def test_history_and_latest(self):
        """Should keep every notification in order."""
        channel = NotificationChannel()
        assert channel.latest is None

        channel.success("Table saved successfully!")
        channel.error("Nothing to save!")

        assert [n.level for n in channel.history] == ["success", "error"]
        assert channel.latest == Notification("error", "Nothing to save!")

    def test_info_undoable(self):
        """Should mark info notifications as undoable when asked to."""
        channel = NotificationChannel()
        notification = channel.info("Input cleared!", "Your input has been cleared.", undoable=True)
        assert notification.undoable is True
        assert notification.description == "Your input has been cleared."

    def test_listeners(self):
        """Should call listeners given at construction and later subscribers."""
        received = []
        channel = NotificationChannel(listeners=[received.append])
        later = []
        channel.subscribe(later.append)

        channel.success("Copied!")

        assert received == later == [Notification("success", "Copied!")]

    def test_clear(self):
        """Should empty the history."""
        channel = NotificationChannel()
        channel.info("hello")
        channel.clear()
        assert channel.history == []

    def test_errors_logged(self, caplog):
        """Should log errors at ERROR level and other notifications at INFO."""
        channel = NotificationChannel()
        with caplog.at_level(logging.INFO, logger="table_formatter.session.notifications"):
            channel.error("Failed to load saved tables")
            channel.success("Restored: Treasure")

        levels = [(r.levelno, r.getMessage()) for r in caplog.records]
        assert (logging.ERROR, "Failed to load saved tables") in levels
        assert (logging.INFO, "Restored: Treasure") in levels
