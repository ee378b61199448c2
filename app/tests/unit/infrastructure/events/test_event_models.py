"""Unit tests for infrastructure.events.models."""

from datetime import datetime
from uuid import UUID

import pytest

from infrastructure.events.models import Event

pytestmark = pytest.mark.unit


class TestEvent:
    """Tests for the Event base model."""

    def test_defaults(self):
        event = Event(event_type="language.changed")
        assert event.event_type == "language.changed"
        assert isinstance(event.timestamp, datetime)
        assert isinstance(event.correlation_id, UUID)
        assert event.metadata == {}

    def test_unique_correlation_ids(self):
        assert Event("a").correlation_id != Event("a").correlation_id

    def test_to_dict(self, event_factory):
        timestamp = datetime(2024, 5, 1, 12, 30)
        event = event_factory(
            event_type="language.changed",
            timestamp=timestamp,
            metadata={"language": "en"},
        )

        data = event.to_dict()

        assert data["event_type"] == "language.changed"
        assert data["timestamp"] == "2024-05-01T12:30:00"
        assert data["correlation_id"] == str(event.correlation_id)
        assert data["metadata"] == {"language": "en"}
