"""
In-Memory Order Repository Implementation.

Stores aggregates in a dictionary for the lifetime of the process.
"""
from typing import Dict, List, Optional
import logging

from core.domain.entities.order import Order
from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import OrderId


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Keyed by order id string; the stored object is the live aggregate.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[str, Order] = {}
        logger.info("InMemoryOrderRepository initialized (in-memory storage)")

    async def save(self, order: Order) -> None:
        """
        Save order to in-memory storage.

        Args:
            order: Order aggregate to save
        """
        self._storage[order.id.value] = order
        logger.info(f"Order saved: {order.id.value} (items: {order.item_count})")

    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        """
        Get order by ID from in-memory storage.

        Args:
            order_id: Order ID to lookup

        Returns:
            Order if found, None otherwise
        """
        order = self._storage.get(order_id.value)

        if order is None:
            logger.info(f"Order not found: {order_id.value}")

        return order

    async def exists(self, order_id: OrderId) -> bool:
        exists = order_id.value in self._storage
        logger.debug(f"Order {order_id.value} exists: {exists}")
        return exists

    def get_all(self) -> List[Order]:
        """
        Get all orders (for demo/testing).

        Returns:
            List of all orders
        """
        return list(self._storage.values())

    def count(self) -> int:
        return len(self._storage)

    def clear(self) -> None:
        """Clear all orders (for demo/testing)."""
        self._storage.clear()
        logger.info("In-memory order repository cleared")
