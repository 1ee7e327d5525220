"""Application DTOs for Order operations."""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field


class MoneyDTO(BaseModel):
    """DTO for a monetary amount."""

    amount: Decimal = Field(..., ge=0, description="Amount with 2 decimal places")
    currency: str = Field(..., description="ISO 4217 currency code")

    model_config = {"frozen": True}


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an empty order."""

    order_id: str = Field(..., description="Order ID (UUID v4)")
    customer_id: str = Field(..., description="Customer ID (UUID v4)")
    currency: str = Field(..., description="Order currency (USD, EUR, COP, GBP, JPY)")

    model_config = {"frozen": True}


class CreateOrderResponse(BaseModel):
    """Response DTO for a created order."""

    order_id: str = Field(..., description="Order ID")
    customer_id: str = Field(..., description="Customer ID")
    currency: str = Field(..., description="Order currency")
    created_at: str = Field(..., description="Creation time (ISO 8601)")

    model_config = {"frozen": True}


class AddItemRequest(BaseModel):
    """Request DTO for adding an item to an existing order."""

    order_id: str = Field(..., description="Order ID (UUID v4)")
    sku: str = Field(..., description="Product SKU")
    qty: int = Field(..., description="Quantity (1-10000)")
    currency: str = Field(..., description="Currency the item is priced in")

    model_config = {"frozen": True}


class AddItemResponse(BaseModel):
    """Response DTO after adding an item."""

    order_id: str = Field(..., description="Order ID")
    total: MoneyDTO = Field(..., description="Updated order total")

    model_config = {"frozen": True}


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    sku: str = Field(..., description="Product SKU")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit_price: MoneyDTO = Field(..., description="Unit price")
    total: MoneyDTO = Field(..., description="Line total")

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    order_id: str = Field(..., description="Order ID")
    customer_id: str = Field(..., description="Customer ID")
    currency: str = Field(..., description="Order currency")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")
    item_count: int = Field(..., ge=0, description="Number of items")
    total: MoneyDTO = Field(..., description="Order total")

    model_config = {"frozen": True}
