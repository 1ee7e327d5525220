"""Application use cases."""
from .add_item_to_order import AddItemToOrderUseCase
from .create_order import CreateOrderUseCase
from .get_order import GetOrderUseCase

__all__ = [
    "AddItemToOrderUseCase",
    "CreateOrderUseCase",
    "GetOrderUseCase",
]
