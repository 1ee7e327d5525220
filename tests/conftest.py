"""Shared fixtures."""
import pytest

from core.domain.value_objects import Currency, CustomerId, Money, OrderId


ORDER_ID = "550e8400-e29b-41d4-a716-446655440000"
CUSTOMER_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"


@pytest.fixture
def usd() -> Currency:
    return Currency.create("USD")


@pytest.fixture
def eur() -> Currency:
    return Currency.create("EUR")


@pytest.fixture
def order_id() -> OrderId:
    return OrderId.create(ORDER_ID)


@pytest.fixture
def customer_id() -> CustomerId:
    return CustomerId.create(CUSTOMER_ID)


@pytest.fixture
def make_money(usd):
    def _make(amount, currency=None) -> Money:
        return Money.create(amount, currency or usd)
    return _make

