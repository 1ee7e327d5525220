"""Mapping between domain objects and application DTOs."""

from core.application.dtos.order_dto import MoneyDTO, OrderDTO, OrderItemDTO
from core.domain.entities.order import Order
from core.domain.entities.order_item import OrderItem
from core.domain.value_objects import Money


def money_to_dto(money: Money) -> MoneyDTO:
    return MoneyDTO(amount=money.amount, currency=money.currency.code)


def order_item_to_dto(item: OrderItem) -> OrderItemDTO:
    return OrderItemDTO(
        sku=item.sku.code,
        quantity=item.quantity.value,
        unit_price=money_to_dto(item.unit_price),
        total=money_to_dto(item.calculate_total()),
    )


def order_to_dto(order: Order) -> OrderDTO:
    """Transform Order aggregate to OrderDTO.

    Note: calls order.calculate_total(), which records an audit event on
    non-empty orders.
    """
    return OrderDTO(
        order_id=order.id.value,
        customer_id=order.customer_id.value,
        currency=order.currency.code,
        items=[order_item_to_dto(item) for item in order.items],
        item_count=order.item_count,
        total=money_to_dto(order.calculate_total()),
    )
