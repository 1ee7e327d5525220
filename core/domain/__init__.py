"""Domain layer - pure domain models and interfaces."""

from .entities import MAX_ITEMS, Order, OrderItem
from .errors import DomainError, DomainErrorKind
from .event_bus import EventBus
from .repositories import OrderRepository
from .value_objects import Currency, CustomerId, Money, OrderId, Quantity, Sku

__all__ = [
    "MAX_ITEMS",
    "Currency",
    "CustomerId",
    "DomainError",
    "DomainErrorKind",
    "EventBus",
    "Money",
    "Order",
    "OrderId",
    "OrderItem",
    "OrderRepository",
    "Quantity",
    "Sku",
]
