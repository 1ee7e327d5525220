"""
Event Bus Implementation (Infrastructure Layer).

Keeps a log of published events and notifies subscribers in-process.
"""
import logging
from typing import Awaitable, Callable, List, Optional, Sequence, Union
import inspect

from core.domain.event_bus import EventBus
from core.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)

Subscriber = Callable[[DomainEvent], Union[None, Awaitable[None]]]


class InMemoryEventBus(EventBus):
    """
    In-Memory Event Bus Implementation.

    Features:
    - Records every published event (inspectable via `published_events`)
    - Notifies registered subscribers, sync or async
    - A failing subscriber is logged and does not stop the others

    Architecture:
    - Infrastructure layer
    - Can be replaced with a message broker (RabbitMQ, Kafka)
    - Preserves publish order
    """

    def __init__(self):
        """Initialize event bus with no subscribers."""
        self._subscribers: List[Subscriber] = []
        self._published: List[DomainEvent] = []

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """
        logger.info(f"Publishing event: {event.event_name} (aggregate: {event.aggregate_id})")
        self._published.append(event)
        await self._notify_subscribers(event)

    async def publish_all(self, events: Sequence[DomainEvent]) -> None:
        """
        Publish multiple domain events in order.

        Args:
            events: Domain events to publish
        """
        if not events:
            return

        logger.info(f"Publishing {len(events)} events")
        for event in events:
            await self.publish(event)

    def subscribe(self, handler: Subscriber) -> None:
        """
        Subscribe to all domain events.

        Args:
            handler: Callback function that receives events
        """
        if handler not in self._subscribers:
            self._subscribers.append(handler)
        logger.info(f"Registered event subscriber: {getattr(handler, '__name__', handler)}")

    def unsubscribe(self, handler: Subscriber) -> None:
        if handler in self._subscribers:
            self._subscribers.remove(handler)
        logger.info(f"Unregistered event subscriber: {getattr(handler, '__name__', handler)}")

    @property
    def published_events(self) -> List[DomainEvent]:
        return list(self._published)

    def clear(self) -> None:
        """Forget published events (for testing)."""
        self._published.clear()

    async def _notify_subscribers(self, event: DomainEvent) -> None:
        """Notify all subscribers about an event."""
        if not self._subscribers:
            return

        logger.debug(f"Notifying {len(self._subscribers)} subscribers about {event.event_name}")

        for subscriber in list(self._subscribers):
            try:
                result = subscriber(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(
                    f"Subscriber {getattr(subscriber, '__name__', subscriber)} failed: {e}",
                    exc_info=True,
                )


# Global event bus instance
_event_bus_instance: Optional[InMemoryEventBus] = None


def get_event_bus() -> InMemoryEventBus:
    """
    Get or create global event bus instance.

    Returns:
        Global event bus instance
    """
    global _event_bus_instance

    if _event_bus_instance is None:
        _event_bus_instance = InMemoryEventBus()

    return _event_bus_instance
