"""Helpers shared by the order use cases."""
import logging
from typing import Any, Callable, TypeVar

from core.application.errors import ValidationError
from core.domain.entities.order import Order
from core.domain.errors import DomainError
from core.domain.event_bus import EventBus


logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_value_object(factory: Callable[[Any], T], raw: Any, field: str) -> T:
    """
    Build a value object from primitive input.

    Raises:
        ValidationError: Carrying the domain message and the offending field
    """
    try:
        return factory(raw)
    except DomainError as e:
        raise ValidationError(e.message, field=field, details={"kind": e.kind.value}) from e


async def publish_pending_events(order: Order, event_bus: EventBus) -> int:
    """
    Publish the order's pending events, then drain them.

    Events are cleared only after a successful publish, so a failing bus
    leaves them pending for the next attempt.

    Returns:
        Number of events published
    """
    events = order.get_domain_events()
    if not events:
        return 0

    await event_bus.publish_all(events)
    order.clear_domain_events()
    logger.debug(f"Published {len(events)} event(s) for order {order.id}")
    return len(events)
