"""
Event system for the parlor games.

This package provides the event bus the game controllers announce their
progress on.
"""

from parlor.events.emitter import (
    EventEmitter,
    EventBus,
    EventPriority,
    EngineEventType,
)

__all__ = ["EventEmitter", "EventBus", "EventPriority", "EngineEventType"]
