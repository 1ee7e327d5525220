"""
Order endpoints.

Thin HTTP adapter over the order use cases; errors are mapped to HTTP
responses by the handlers in api.errors.
"""
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field
import logging

from core.application.dtos import AddItemRequest, CreateOrderRequest
from core.application.use_cases import (
    AddItemToOrderUseCase,
    CreateOrderUseCase,
    GetOrderUseCase,
)
from api.dependencies import (
    get_add_item_use_case,
    get_create_order_use_case,
    get_get_order_use_case,
)


logger = logging.getLogger(__name__)
router = APIRouter()


class AddItemBody(BaseModel):
    """Request body for adding an item; the order id comes from the path."""
    sku: str = Field(..., description="Product SKU")
    qty: int = Field(..., description="Quantity (1-10000)")
    currency: str = Field(..., description="Currency the item is priced in")


# =============================================================================
# CREATE ORDER
# =============================================================================

@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create an order",
    description="Create a new, empty order for a customer in a given currency",
)
async def create_order(
    request: CreateOrderRequest,
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
):
    """
    Create an empty order.

    **Returns:**
    - 201 with the created order
    - 400 on malformed ids or unsupported currency
    - 409 if the order id already exists
    """
    result = await use_case.execute(request)
    return {"success": True, "data": result.model_dump(mode="json")}


# =============================================================================
# ADD ITEM
# =============================================================================

@router.post(
    "/{order_id}/items",
    status_code=status.HTTP_200_OK,
    summary="Add item to order",
    description="Add a catalog-priced item to an existing order",
)
async def add_item(
    order_id: str,
    body: AddItemBody,
    use_case: AddItemToOrderUseCase = Depends(get_add_item_use_case),
):
    """
    Add an item and return the updated order total.

    **Returns:**
    - 200 with the new total
    - 400 on malformed input or currency mismatch
    - 404 if the order or the product price does not exist
    - 409 on duplicate SKU or item limit
    """
    result = await use_case.execute(
        AddItemRequest(order_id=order_id, sku=body.sku, qty=body.qty, currency=body.currency)
    )
    return {"success": True, "data": result.model_dump(mode="json")}


# =============================================================================
# GET ORDER
# =============================================================================

@router.get(
    "/{order_id}",
    status_code=status.HTTP_200_OK,
    summary="Get order by ID",
    description="Get an order with its items and total",
)
async def get_order(
    order_id: str,
    use_case: GetOrderUseCase = Depends(get_get_order_use_case),
):
    result = await use_case.execute(order_id)
    return {"success": True, "data": result.model_dump(mode="json")}
