"""Explicit observer list for broadcasting events.

Each EventChannel owns its own handler registry, so a component publishes to
the channel it was given instead of an ambient global target. Handlers are
called synchronously in registration order when an event is dispatched.
"""

from typing import Callable, Dict, List

from infrastructure.events.models import Event
from infrastructure.logging import get_module_logger

logger = get_module_logger()

EventHandler = Callable[[Event], None]


class EventChannel:
    """In-process, instance-scoped event dispatcher.

    Attributes:
        name: Channel name, used in log entries.
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self._handlers: Dict[str, List[EventHandler]] = {}

    def register_handler(self, event_type: str, handler: EventHandler) -> EventHandler:
        """Register a handler for an event type.

        Args:
            event_type: The type of event to handle (e.g., 'language.changed').
            handler: Callable receiving the event.

        Returns:
            The handler, so the method can be used as a decorator body.
        """
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(
            "registered_event_handler",
            channel=self.name,
            handler=getattr(handler, "__name__", "unknown"),
            event_type=event_type,
            total_handlers=len(self._handlers[event_type]),
        )
        return handler

    def unregister_handler(self, event_type: str, handler: EventHandler) -> bool:
        """Remove a previously registered handler.

        Returns:
            True if the handler was registered and has been removed.
        """
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        if not handlers:
            del self._handlers[event_type]
        logger.debug(
            "unregistered_event_handler",
            channel=self.name,
            handler=getattr(handler, "__name__", "unknown"),
            event_type=event_type,
        )
        return True

    def dispatch(self, event: Event) -> None:
        """Broadcast an event to every handler registered for its type.

        If a handler raises, the exception is logged and the remaining
        handlers still run. Nothing is returned to the publisher.
        """
        # Copy so handlers may unregister themselves while being called
        handlers = list(self._handlers.get(event.event_type, []))

        logger.info(
            "dispatching_event",
            channel=self.name,
            event_type=event.event_type,
            handler_count=len(handlers),
            correlation_id=str(event.correlation_id),
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    "event_handler_failed",
                    channel=self.name,
                    handler=getattr(handler, "__name__", "unknown"),
                    event_type=event.event_type,
                    error=str(e),
                    correlation_id=str(event.correlation_id),
                )

    def get_handlers(self, event_type: str) -> List[EventHandler]:
        """Get the handlers registered for an event type, in call order."""
        return list(self._handlers.get(event_type, []))

    def get_registered_events(self) -> List[str]:
        """Get the event types that currently have handlers."""
        return list(self._handlers.keys())

    def clear(self) -> None:
        """Remove every registered handler."""
        self._handlers.clear()
