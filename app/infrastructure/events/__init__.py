"""Infrastructure event system - explicit notification channels.

Usage:

    from infrastructure.events import Event, EventChannel

    channel = EventChannel("i18n")

    def on_language_changed(event: Event) -> None:
        ...

    channel.register_handler("language.changed", on_language_changed)
    channel.dispatch(Event(event_type="language.changed", metadata={"language": "en"}))
    channel.unregister_handler("language.changed", on_language_changed)
"""

from infrastructure.events.channel import EventChannel, EventHandler
from infrastructure.events.models import Event

__all__ = [
    "Event",
    "EventChannel",
    "EventHandler",
]
