"""Event records broadcast on an EventChannel."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict
from uuid import UUID, uuid4


@dataclass
class Event:
    """Something that already happened, described for listeners.

    Subclasses keep their payload in ``metadata`` and expose typed
    properties over it, so every event serializes the same way.
    """

    event_type: str
    """Dotted event name listeners register for (e.g., 'language.changed')."""

    timestamp: datetime = field(default_factory=datetime.now)

    correlation_id: UUID = field(default_factory=uuid4)
    """Ties the event to the log entries of the cycle that produced it."""

    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form: ISO timestamp, string UUID, copied payload."""
        return {
            "event_type": self.event_type,
            "timestamp": self.timestamp.isoformat(),
            "correlation_id": str(self.correlation_id),
            "metadata": dict(self.metadata),
        }
