"""Domain entities."""
from .order import MAX_ITEMS, Order
from .order_item import OrderItem

__all__ = ["MAX_ITEMS", "Order", "OrderItem"]
