"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by the whole suite.
"""

import random

import pytest

from parlor.events import EventBus


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


@pytest.fixture
def rng():
    """A seeded random source so runs are reproducible."""
    return random.Random(1234)


@pytest.fixture
def recorded_events():
    """Every event emitted on the bus during the test, as (type, data) pairs."""
    events = []
    EventBus.get_instance().on_any(events.append)
    return events
