"""No-op Event Bus: accepts and discards every event."""
from typing import Sequence

from core.domain.event_bus import EventBus
from core.domain.events.base import DomainEvent


class NoopEventBus(EventBus):
    """Event bus that drops events. Useful for testing and local development."""

    async def publish(self, event: DomainEvent) -> None:
        return None

    async def publish_all(self, events: Sequence[DomainEvent]) -> None:
        return None
