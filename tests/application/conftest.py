"""Fixtures for use case tests."""
from datetime import datetime, timezone

import pytest

from core.application.use_cases import AddItemToOrderUseCase, CreateOrderUseCase, GetOrderUseCase
from core.infrastructure.adapters.persistence import InMemoryOrderRepository
from core.infrastructure.adapters.pricing import StaticPricingService
from core.infrastructure.clock import FixedClock
from core.infrastructure.event_bus import InMemoryEventBus


FIXED_NOW = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def pricing_service() -> StaticPricingService:
    return StaticPricingService(
        {
            "LAPTOP-001": {"USD": "999.99", "EUR": "899.99"},
            "MOUSE-001": {"USD": "29.99"},
            "KEYBOARD-001": {"USD": "79.99"},
        }
    )


@pytest.fixture
def create_order(repository, event_bus) -> CreateOrderUseCase:
    return CreateOrderUseCase(repository, event_bus, FixedClock(FIXED_NOW))


@pytest.fixture
def add_item(repository, pricing_service, event_bus) -> AddItemToOrderUseCase:
    return AddItemToOrderUseCase(repository, pricing_service, event_bus)


@pytest.fixture
def get_order(repository, event_bus) -> GetOrderUseCase:
    return GetOrderUseCase(repository, event_bus)
