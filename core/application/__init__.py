"""Application layer - use cases, ports, DTOs and errors."""

from .dtos import (
    AddItemRequest,
    AddItemResponse,
    CreateOrderRequest,
    CreateOrderResponse,
    MoneyDTO,
    OrderDTO,
    OrderItemDTO,
)
from .errors import AppError, ConflictError, InfraError, NotFoundError, ValidationError
from .ports import Clock, PricingService
from .use_cases import AddItemToOrderUseCase, CreateOrderUseCase, GetOrderUseCase

__all__ = [
    # DTOs
    "AddItemRequest",
    "AddItemResponse",
    "CreateOrderRequest",
    "CreateOrderResponse",
    "MoneyDTO",
    "OrderDTO",
    "OrderItemDTO",
    # Errors
    "AppError",
    "ConflictError",
    "InfraError",
    "NotFoundError",
    "ValidationError",
    # Ports
    "Clock",
    "PricingService",
    # Use Cases
    "AddItemToOrderUseCase",
    "CreateOrderUseCase",
    "GetOrderUseCase",
]
