"""Fixtures for EventChannel tests."""

from datetime import datetime
from typing import Optional
from unittest.mock import MagicMock

import pytest

from infrastructure.events import Event, EventChannel


@pytest.fixture
def event_factory():
    """Build events of a given type; every call gets a fresh correlation id."""

    def _make(
        event_type: str = "test.event",
        timestamp: Optional[datetime] = None,
        metadata: Optional[dict] = None,
    ) -> Event:
        event = Event(event_type=event_type, metadata=metadata or {})
        if timestamp is not None:
            event.timestamp = timestamp
        return event

    return _make


@pytest.fixture
def channel():
    """Fresh channel per test; channels share no state."""
    return EventChannel("test")


@pytest.fixture
def mock_event_handler():
    """Named mock handler (the channel logs handler names)."""
    handler = MagicMock()
    handler.__name__ = "mock_event_handler"
    return handler
