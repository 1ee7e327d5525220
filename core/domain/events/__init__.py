"""Domain events for the Order aggregate."""
from .base import DomainEvent
from .order_events import ItemAddedToOrder, OrderCreated, OrderTotalCalculated

__all__ = [
    "DomainEvent",
    "OrderCreated",
    "ItemAddedToOrder",
    "OrderTotalCalculated",
]
