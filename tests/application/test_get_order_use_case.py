"""Tests for GetOrderUseCase."""
from decimal import Decimal

import pytest

from core.application.dtos import AddItemRequest, CreateOrderRequest
from core.application.errors import NotFoundError, ValidationError
from core.domain.events import OrderTotalCalculated

from tests.conftest import CUSTOMER_ID, ORDER_ID


@pytest.mark.asyncio
async def test_get_order_with_items(create_order, add_item, get_order, event_bus):
    await create_order.execute(
        CreateOrderRequest(order_id=ORDER_ID, customer_id=CUSTOMER_ID, currency="USD")
    )
    await add_item.execute(AddItemRequest(order_id=ORDER_ID, sku="LAPTOP-001", qty=2, currency="USD"))
    await add_item.execute(AddItemRequest(order_id=ORDER_ID, sku="MOUSE-001", qty=1, currency="USD"))

    dto = await get_order.execute(ORDER_ID)

    assert dto.order_id == ORDER_ID
    assert dto.customer_id == CUSTOMER_ID
    assert dto.item_count == 2
    assert [item.sku for item in dto.items] == ["LAPTOP-001", "MOUSE-001"]
    assert dto.items[0].total.amount == Decimal("1999.98")
    assert dto.total.amount == Decimal("2029.97")
    assert isinstance(event_bus.published_events[-1], OrderTotalCalculated)


@pytest.mark.asyncio
async def test_get_empty_order(create_order, get_order):
    await create_order.execute(
        CreateOrderRequest(order_id=ORDER_ID, customer_id=CUSTOMER_ID, currency="EUR")
    )

    dto = await get_order.execute(ORDER_ID)

    assert dto.items == []
    assert dto.total.amount == Decimal("0")
    assert dto.total.currency == "EUR"


@pytest.mark.asyncio
async def test_get_missing_order(get_order):
    with pytest.raises(NotFoundError):
        await get_order.execute(ORDER_ID)


@pytest.mark.asyncio
async def test_get_order_with_malformed_id(get_order):
    with pytest.raises(ValidationError):
        await get_order.execute("not-a-uuid")
