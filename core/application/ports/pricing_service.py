"""Pricing service port."""
from abc import ABC, abstractmethod

from core.domain.value_objects import Currency, Money, Sku


class PricingService(ABC):
    """
    Interface for product price lookups.

    Implementations may hit a catalog database or an external API.
    """

    @abstractmethod
    async def get_price(self, sku: Sku, currency: Currency) -> Money:
        """
        Get unit price of a product in the given currency.

        Args:
            sku: Product code
            currency: Currency to price in

        Returns:
            Unit price

        Raises:
            NotFoundError: If the SKU is unknown or has no price in currency
            InfraError: If the pricing backend fails
        """
        pass

    @abstractmethod
    async def product_exists(self, sku: Sku) -> bool:
        """Check whether the SKU is present in the catalog."""
        pass
