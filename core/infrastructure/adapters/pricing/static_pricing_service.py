"""
Static Pricing Service Implementation.

Serves prices from a fixed in-memory catalog. Useful for testing and
local development.
"""
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Union
import logging

from core.application.errors import InfraError, NotFoundError
from core.application.ports.pricing_service import PricingService
from core.domain.errors import DomainError
from core.domain.value_objects import Currency, Money, Sku


logger = logging.getLogger(__name__)

PriceAmount = Union[int, float, str, Decimal]


class StaticPricingService(PricingService):
    """
    Catalog of {SKU: {CURRENCY: amount}}.

    Keys are upper-cased on insert so lookups by normalized Sku/Currency
    always match.
    """

    def __init__(self, catalog: Optional[Mapping[str, Mapping[str, PriceAmount]]] = None):
        self._prices: Dict[str, Dict[str, PriceAmount]] = {}

        if catalog:
            for sku, prices in catalog.items():
                for currency, price in prices.items():
                    self.add_price(sku, currency, price)

        logger.info(f"StaticPricingService initialized ({len(self._prices)} products)")

    async def get_price(self, sku: Sku, currency: Currency) -> Money:
        sku_prices = self._prices.get(sku.code)
        if sku_prices is None:
            raise NotFoundError(
                f"Product with SKU '{sku.code}' not found",
                resource_type="Product",
                resource_id=sku.code,
            )

        if currency.code not in sku_prices:
            raise NotFoundError(
                f"Price for SKU '{sku.code}' not available in currency '{currency.code}'",
                resource_type="Price",
                resource_id=f"{sku.code}-{currency.code}",
            )

        try:
            return Money.create(sku_prices[currency.code], currency)
        except DomainError as e:
            raise InfraError(
                f"Failed to create Money object for SKU '{sku.code}'",
                service_name="StaticPricingService",
                original_error=e,
            ) from e

    async def product_exists(self, sku: Sku) -> bool:
        return sku.code in self._prices

    # Catalog management (testing / configuration)

    def add_price(self, sku: str, currency: str, price: PriceAmount) -> None:
        sku_key = sku.strip().upper()
        currency_key = currency.strip().upper()
        self._prices.setdefault(sku_key, {})[currency_key] = price

    def remove_price(self, sku: str, currency: Optional[str] = None) -> None:
        sku_key = sku.strip().upper()

        if currency is None:
            self._prices.pop(sku_key, None)
            return

        sku_prices = self._prices.get(sku_key)
        if sku_prices is not None:
            sku_prices.pop(currency.strip().upper(), None)

    def clear(self) -> None:
        self._prices.clear()

    def get_all_products(self) -> List[str]:
        return list(self._prices.keys())

