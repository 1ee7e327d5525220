"""Tests for AddItemToOrderUseCase."""
from decimal import Decimal

import pytest
import pytest_asyncio

from core.application.dtos import AddItemRequest, CreateOrderRequest
from core.application.errors import ConflictError, InfraError, NotFoundError, ValidationError
from core.domain.entities import MAX_ITEMS
from core.domain.events import ItemAddedToOrder, OrderCreated, OrderTotalCalculated
from core.domain.value_objects import OrderId

from tests.conftest import CUSTOMER_ID, ORDER_ID


def _add(sku="LAPTOP-001", qty=1, currency="USD", order_id=ORDER_ID) -> AddItemRequest:
    return AddItemRequest(order_id=order_id, sku=sku, qty=qty, currency=currency)


@pytest_asyncio.fixture
async def existing_order(create_order):
    await create_order.execute(
        CreateOrderRequest(order_id=ORDER_ID, customer_id=CUSTOMER_ID, currency="USD")
    )


class TestSuccessfulItemAddition:

    @pytest.mark.asyncio
    async def test_add_item_to_existing_order(self, add_item, existing_order):
        response = await add_item.execute(_add(qty=2))

        assert response.order_id == ORDER_ID
        assert response.total.amount == Decimal("1999.98")
        assert response.total.currency == "USD"

    @pytest.mark.asyncio
    async def test_add_multiple_items(self, add_item, repository, existing_order):
        await add_item.execute(_add("LAPTOP-001", 1))
        response = await add_item.execute(_add("MOUSE-001", 2))

        assert response.total.amount == Decimal("1059.97")
        order = await repository.find_by_id(OrderId.create(ORDER_ID))
        assert order.item_count == 2

    @pytest.mark.asyncio
    async def test_events_are_published_in_order(self, add_item, event_bus, existing_order):
        await add_item.execute(_add("LAPTOP-001", 1))
        await add_item.execute(_add("MOUSE-001", 1))

        # The total audit event of the first call rides along with the second
        assert [type(e) for e in event_bus.published_events] == [
            OrderCreated,
            ItemAddedToOrder,
            OrderTotalCalculated,
            ItemAddedToOrder,
        ]

    @pytest.mark.asyncio
    async def test_sku_is_normalized(self, add_item, repository, existing_order):
        await add_item.execute(_add(" laptop-001 ", 1))
        order = await repository.find_by_id(OrderId.create(ORDER_ID))
        assert order.items[0].sku.code == "LAPTOP-001"


class TestFailures:

    @pytest.mark.asyncio
    async def test_order_not_found(self, add_item):
        with pytest.raises(NotFoundError) as exc_info:
            await add_item.execute(_add())

        assert exc_info.value.resource_type == "Order"
        assert exc_info.value.resource_id == ORDER_ID

    @pytest.mark.asyncio
    async def test_unknown_product(self, add_item, existing_order):
        with pytest.raises(NotFoundError) as exc_info:
            await add_item.execute(_add("UNKNOWN-SKU"))

        assert exc_info.value.resource_type == "Product"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs, field",
        [
            ({"order_id": "nope"}, "order_id"),
            ({"sku": "x"}, "sku"),
            ({"qty": 0}, "qty"),
            ({"qty": 10_001}, "qty"),
            ({"currency": "ABC"}, "currency"),
        ],
    )
    async def test_invalid_input(self, add_item, existing_order, kwargs, field):
        with pytest.raises(ValidationError) as exc_info:
            await add_item.execute(_add(**kwargs))

        assert exc_info.value.field == field

    @pytest.mark.asyncio
    async def test_currency_mismatch_with_order(self, add_item, repository, existing_order):
        with pytest.raises(ValidationError) as exc_info:
            await add_item.execute(_add(currency="EUR"))

        assert exc_info.value.field == "currency"
        assert exc_info.value.details == {"order_currency": "USD", "item_currency": "EUR"}
        order = await repository.find_by_id(OrderId.create(ORDER_ID))
        assert order.is_empty()

    @pytest.mark.asyncio
    async def test_duplicate_sku_is_conflict(self, add_item, repository, existing_order):
        await add_item.execute(_add("LAPTOP-001", 1))

        with pytest.raises(ConflictError) as exc_info:
            await add_item.execute(_add("laptop-001", 3))

        assert exc_info.value.code == "BUSINESS_RULE_VIOLATION"
        assert exc_info.value.details["kind"] == "DUPLICATE_SKU"
        order = await repository.find_by_id(OrderId.create(ORDER_ID))
        assert order.item_count == 1

    @pytest.mark.asyncio
    async def test_item_limit_is_conflict(self, add_item, pricing_service, existing_order):
        for i in range(MAX_ITEMS):
            pricing_service.add_price(f"ITEM-{i:03d}", "USD", "1.00")
            await add_item.execute(_add(f"ITEM-{i:03d}", 1))

        pricing_service.add_price("ITEM-EXTRA", "USD", "1.00")
        with pytest.raises(ConflictError) as exc_info:
            await add_item.execute(_add("ITEM-EXTRA", 1))

        assert exc_info.value.details["kind"] == "ITEM_LIMIT_EXCEEDED"

    @pytest.mark.asyncio
    async def test_pricing_failure_is_infra_error(self, add_item, pricing_service, existing_order, monkeypatch):
        async def broken_get_price(sku, currency):
            raise ConnectionError("pricing down")

        monkeypatch.setattr(pricing_service, "get_price", broken_get_price)

        with pytest.raises(InfraError) as exc_info:
            await add_item.execute(_add())

        assert exc_info.value.service_name == "PricingService"

    @pytest.mark.asyncio
    async def test_failed_publish_keeps_events_pending(self, add_item, repository, event_bus, existing_order, monkeypatch):
        async def broken_publish_all(events):
            raise ConnectionError("broker down")

        monkeypatch.setattr(event_bus, "publish_all", broken_publish_all)

        with pytest.raises(InfraError):
            await add_item.execute(_add())

        order = await repository.find_by_id(OrderId.create(ORDER_ID))
        assert [type(e) for e in order.get_domain_events()] == [ItemAddedToOrder]
