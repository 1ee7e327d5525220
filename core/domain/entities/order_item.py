"""Order line item value object."""
from dataclasses import dataclass

from ..value_objects import Money, Quantity, Sku


@dataclass(frozen=True)
class OrderItem:
    """
    Individual line item within an order.

    Pure composition of already-validated value objects; no cross-field
    validation beyond what Sku, Money and Quantity enforce.
    """
    sku: Sku
    unit_price: Money
    quantity: Quantity

    @classmethod
    def create(cls, sku: Sku, unit_price: Money, quantity: Quantity) -> "OrderItem":
        return cls(sku=sku, unit_price=unit_price, quantity=quantity)

    def calculate_total(self) -> Money:
        """Line total: unit price x quantity, in the unit price currency."""
        return self.unit_price.multiply(self.quantity.value)

    def has_same_sku(self, other: "OrderItem") -> bool:
        return self.sku == other.sku

    def has_same_currency(self, other: "OrderItem") -> bool:
        return self.unit_price.currency == other.unit_price.currency

    def __str__(self) -> str:
        return (
            f"{self.sku.code} x {self.quantity.value} @ {self.unit_price} "
            f"= {self.calculate_total()}"
        )
