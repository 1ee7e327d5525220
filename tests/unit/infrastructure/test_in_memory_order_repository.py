"""Tests for InMemoryOrderRepository."""
import pytest

from core.domain.entities import Order
from core.domain.value_objects import Currency, CustomerId, OrderId
from core.infrastructure.adapters.persistence import InMemoryOrderRepository


def _order() -> Order:
    return Order.create(OrderId.generate(), CustomerId.generate(), Currency.create("USD"))


@pytest.mark.asyncio
async def test_save_and_find():
    repo = InMemoryOrderRepository()
    order = _order()

    await repo.save(order)

    assert await repo.exists(order.id)
    assert await repo.find_by_id(OrderId.create(order.id.value)) is order


@pytest.mark.asyncio
async def test_find_missing_returns_none():
    repo = InMemoryOrderRepository()

    assert await repo.find_by_id(OrderId.generate()) is None
    assert not await repo.exists(OrderId.generate())


@pytest.mark.asyncio
async def test_save_overwrites_same_id():
    repo = InMemoryOrderRepository()
    order = _order()

    await repo.save(order)
    await repo.save(order)

    assert repo.count() == 1
    assert repo.get_all() == [order]

    repo.clear()
    assert repo.count() == 0
