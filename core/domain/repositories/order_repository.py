"""Repository interface for Order aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.order import Order
from ..value_objects import OrderId


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def save(self, order: Order) -> None:
        """Persist a new order or replace an existing one.

        Args:
            order: Order aggregate to persist
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, order_id: OrderId) -> bool:
        """Check if order already exists (duplicate prevention).

        Args:
            order_id: OrderId identifier

        Returns:
            True if order exists, False otherwise
        """
        pass
