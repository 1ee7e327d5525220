"""Application DTOs."""

from .order_dto import (
    AddItemRequest,
    AddItemResponse,
    CreateOrderRequest,
    CreateOrderResponse,
    MoneyDTO,
    OrderDTO,
    OrderItemDTO,
)

__all__ = [
    "AddItemRequest",
    "AddItemResponse",
    "CreateOrderRequest",
    "CreateOrderResponse",
    "MoneyDTO",
    "OrderDTO",
    "OrderItemDTO",
]
