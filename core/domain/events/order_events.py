"""
Order Domain Events.

Recorded by the Order aggregate and drained by the application layer,
which hands them to the Event Bus.
"""
from dataclasses import dataclass

from ..value_objects import Currency, CustomerId, Money, OrderId, Quantity, Sku
from .base import DomainEvent


@dataclass(frozen=True, kw_only=True)
class OrderCreated(DomainEvent):
    """
    A new, empty order was created.

    Trigger: Order.create()
    """

    order_id: OrderId
    customer_id: CustomerId
    currency: Currency


@dataclass(frozen=True, kw_only=True)
class ItemAddedToOrder(DomainEvent):
    """
    A line item was appended to an order.

    Trigger: Order.add_item() (successful calls only)
    """

    order_id: OrderId
    sku: Sku
    unit_price: Money
    quantity: Quantity
    item_total: Money


@dataclass(frozen=True, kw_only=True)
class OrderTotalCalculated(DomainEvent):
    """
    Audit record of a total calculation.

    Trigger: Order.calculate_total() on a non-empty order, every call.
    """

    order_id: OrderId
    total: Money
    item_count: int
