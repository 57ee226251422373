"""Event bus - fan-out of domain events to observers."""

from collections.abc import Callable

from loguru import logger

from app.models.common import DomainEvent

EventHandler = Callable[[DomainEvent], None]


def log_event(event: DomainEvent) -> None:
    """Handler that writes each event to the log."""
    logger.info("Event {}: {}", event.event_name, event.to_dict())


class EventBus:
    """Publishes events to subscribed handlers.

    A failing handler is logged and skipped; it never fails the operation that
    emitted the event.
    """

    def __init__(self, handlers: list[EventHandler] | None = None):
        self._handlers: list[EventHandler] = list(handlers or [])

    def subscribe(self, handler: EventHandler) -> None:
        self._handlers.append(handler)

    def publish(self, event: DomainEvent) -> None:
        for handler in self._handlers:
            try:
                handler(event)
            except Exception as e:
                logger.warning("Event handler {} failed on {}: {}", getattr(handler, "__name__", handler), event.event_name, e)
