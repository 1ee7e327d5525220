"""
Event Bus Interface (Domain Layer).

Pure interface definition - no implementation details.
"""
from abc import ABC, abstractmethod
from typing import Sequence

from .events.base import DomainEvent


class EventBus(ABC):
    """
    Event Bus Interface.

    Architecture:
    - Domain interface (no implementation)
    - Implemented in infrastructure layer
    - Fed by use cases with events drained from aggregates
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """
        pass

    @abstractmethod
    async def publish_all(self, events: Sequence[DomainEvent]) -> None:
        """
        Publish multiple domain events in order.

        Args:
            events: Domain events to publish
        """
        pass
