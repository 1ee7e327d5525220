"""Domain value objects - pure Python immutable types."""

from .currency import SUPPORTED_CURRENCIES, Currency
from .money import Money
from .sku import Sku
from .quantity import MAX_QUANTITY, Quantity
from .identifiers import CustomerId, OrderId

__all__ = [
    "SUPPORTED_CURRENCIES",
    "Currency",
    "Money",
    "Sku",
    "MAX_QUANTITY",
    "Quantity",
    "OrderId",
    "CustomerId",
]
