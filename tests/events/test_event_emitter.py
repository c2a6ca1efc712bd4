"""
Tests for the event system.

This module contains tests for the EventEmitter and EventBus classes
to ensure they provide the expected behavior for event handling.
"""

import threading
from unittest.mock import MagicMock

from parlor.events import EventEmitter, EventBus, EngineEventType, EventPriority


def test_event_emitter_initialization():
    """Test that the EventEmitter initializes with no listeners."""
    emitter = EventEmitter()
    assert emitter.listener_count() == 0


def test_on_with_string_event_type():
    """Test subscribing to an event with a string event type."""
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on("test_event", callback)

    test_data = {"value": "test"}
    emitter.emit("test_event", test_data)
    callback.assert_called_once_with(test_data)

    # Unsubscribe and emit again
    unsubscribe()
    emitter.emit("test_event", {"value": "test2"})
    assert callback.call_count == 1


def test_on_with_enum_event_type():
    """Test subscribing with an enum and emitting with its name."""
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.on(EngineEventType.CARD_DEALT, callback)

    test_data = {"card": "A of ♠"}
    emitter.emit("CARD_DEALT", test_data)

    callback.assert_called_once_with(test_data)
    assert emitter.listener_count(EngineEventType.CARD_DEALT) == 1


def test_once_subscription():
    """Test subscribing to an event for a single occurrence."""
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.once("test_event", callback)

    emitter.emit("test_event", {"id": 1})
    emitter.emit("test_event", {"id": 2})

    callback.assert_called_once()
    assert callback.call_args[0][0]["id"] == 1
    assert emitter.listener_count("test_event") == 0


def test_once_unsubscribes_even_when_handler_raises():
    emitter = EventEmitter()

    def broken(data):
        raise RuntimeError("boom")

    emitter.once("test_event", broken)
    emitter.emit("test_event", {})

    assert emitter.listener_count("test_event") == 0


def test_on_any_subscription():
    """Test subscribing to all events."""
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on_any(callback)

    emitter.emit("event1", {"id": 1})
    emitter.emit(EngineEventType.MOVE_MADE, {"id": 2})

    assert callback.call_count == 2
    event_type, event_data = callback.call_args_list[0][0][0]
    assert event_type == "event1"
    assert event_data["id"] == 1
    event_type, _ = callback.call_args_list[1][0][0]
    assert event_type == "MOVE_MADE"

    unsubscribe()
    emitter.emit("event3", {"id": 3})
    assert callback.call_count == 2


def test_emitter_priority():
    """Test that handlers are called in priority order."""
    emitter = EventEmitter()
    call_order = []

    emitter.on("test_event", lambda d: call_order.append("normal"), EventPriority.NORMAL)
    emitter.on("test_event", lambda d: call_order.append("low"), EventPriority.LOW)
    emitter.on(
        "test_event", lambda d: call_order.append("critical"), EventPriority.CRITICAL
    )
    emitter.on("test_event", lambda d: call_order.append("high"), EventPriority.HIGH)

    emitter.emit("test_event", {})

    assert call_order == ["critical", "high", "normal", "low"]


def test_equal_priorities_keep_subscription_order():
    emitter = EventEmitter()
    call_order = []

    emitter.on("test_event", lambda d: call_order.append("first"))
    emitter.on("test_event", lambda d: call_order.append("second"))
    emitter.emit("test_event", {})

    assert call_order == ["first", "second"]


def test_remove_all_listeners():
    """Test removing all listeners."""
    emitter = EventEmitter()
    callback1 = MagicMock()
    callback2 = MagicMock()

    emitter.on("event1", callback1)
    emitter.on("event2", callback2)

    emitter.remove_all_listeners("event1")

    emitter.emit("event1", {"id": 1})
    emitter.emit("event2", {"id": 2})

    callback1.assert_not_called()
    callback2.assert_called_once()

    emitter.remove_all_listeners()

    callback2.reset_mock()
    emitter.emit("event2", {"id": 3})
    callback2.assert_not_called()


def test_emit_exceptions_are_caught(caplog):
    """Test that exceptions in event handlers are logged and don't stop execution."""
    emitter = EventEmitter()

    def callback_raises_exception(data):
        raise ValueError("Test exception")

    callback_after = MagicMock()

    emitter.on("test_event", callback_raises_exception)
    emitter.on("test_event", callback_after)

    emitter.emit("test_event", {})

    callback_after.assert_called_once()
    assert "Test exception" in caplog.text


def test_event_bus_singleton():
    """Test that EventBus is a singleton."""
    bus1 = EventBus.get_instance()
    bus2 = EventBus.get_instance()

    assert bus1 is bus2
    assert isinstance(bus1, EventEmitter)


def test_thread_safety():
    """Test thread safety of event emission."""
    emitter = EventEmitter()
    count = {"value": 0}
    lock = threading.Lock()

    def increment_counter(data):
        with lock:
            count["value"] += 1

    emitter.on("test_event", increment_counter)

    threads = [
        threading.Thread(target=lambda: emitter.emit("test_event", {}))
        for _ in range(10)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert count["value"] == 10
