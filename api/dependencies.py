"""
FastAPI Dependencies.

Provides dependency injection for use cases and adapters.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.ports import Clock, PricingService
from core.application.use_cases import (
    AddItemToOrderUseCase,
    CreateOrderUseCase,
    GetOrderUseCase,
)
from core.domain.event_bus import EventBus
from core.domain.repositories import OrderRepository
from core.infrastructure.adapters.messaging import NoopEventBus
from core.infrastructure.adapters.persistence import InMemoryOrderRepository
from core.infrastructure.adapters.pricing import StaticPricingService
from core.infrastructure.clock import SystemClock
from core.infrastructure.event_bus import get_event_bus as get_in_memory_event_bus
from core.settings import get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_order_repository: Optional[OrderRepository] = None
_pricing_service: Optional[PricingService] = None
_event_bus: Optional[EventBus] = None
_clock: Optional[Clock] = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_order_repository() -> OrderRepository:
    global _order_repository
    if _order_repository is None:
        _order_repository = InMemoryOrderRepository()
        logger.info("Created InMemoryOrderRepository instance")
    return _order_repository


def get_pricing_service() -> PricingService:
    global _pricing_service
    if _pricing_service is None:
        settings = get_app_settings()
        _pricing_service = StaticPricingService(settings.pricing.catalog)
        logger.info("Created StaticPricingService instance")
    return _pricing_service


def get_event_bus() -> EventBus:
    global _event_bus

    if _event_bus is None:
        settings = get_app_settings()

        if settings.event_bus.backend == "noop":
            _event_bus = NoopEventBus()
            logger.info("Using NoopEventBus (events are dropped)")
        else:
            _event_bus = get_in_memory_event_bus()
            logger.info("Using InMemoryEventBus")

    return _event_bus


def get_clock() -> Clock:
    global _clock
    if _clock is None:
        _clock = SystemClock()
    return _clock


def get_create_order_use_case() -> CreateOrderUseCase:
    return CreateOrderUseCase(
        order_repository=get_order_repository(),
        event_bus=get_event_bus(),
        clock=get_clock(),
    )


def get_add_item_use_case() -> AddItemToOrderUseCase:
    return AddItemToOrderUseCase(
        order_repository=get_order_repository(),
        pricing_service=get_pricing_service(),
        event_bus=get_event_bus(),
    )


def get_get_order_use_case() -> GetOrderUseCase:
    return GetOrderUseCase(
        order_repository=get_order_repository(),
        event_bus=get_event_bus(),
    )


# =============================================================================
# RESET (for testing)
# =============================================================================

def reset_dependencies():
    global _order_repository, _pricing_service, _event_bus, _clock

    _order_repository = None
    _pricing_service = None
    _event_bus = None
    _clock = None

    logger.info("Dependencies reset")
