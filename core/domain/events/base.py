"""
Base Domain Event.

All domain events inherit from this base class.
Events are immutable records of facts that already happened inside an
aggregate; they are never mutated after creation.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict
import uuid

from ..value_objects import Money, Quantity


_METADATA_FIELDS = ("event_id", "occurred_at")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for all domain events.

    Carries the occurrence timestamp and a unique id; concrete events add
    the fields relevant to the action as keyword-only fields.
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    occurred_at: datetime = field(default_factory=_utcnow)

    @property
    def event_name(self) -> str:
        """Event name, e.g. "OrderCreated"."""
        return self.__class__.__name__

    @property
    def aggregate_id(self) -> str:
        """Identifier of the aggregate that recorded the event."""
        order_id = getattr(self, "order_id", None)
        return str(order_id) if order_id is not None else ""

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to dictionary for serialization.

        Used for:
        - Event Bus publishing
        - Logs and API responses

        Returns:
            Dictionary representation of event
        """
        return {
            "event_id": self.event_id,
            "event_name": self.event_name,
            "aggregate_id": self.aggregate_id,
            "occurred_at": self.occurred_at.isoformat(),
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """Serialize event-specific fields (value objects become primitives)."""
        data = {}
        for f in fields(self):
            if f.name in _METADATA_FIELDS:
                continue
            data[f.name] = _serialize(getattr(self, f.name))
        return data


def _serialize(value: Any) -> Any:
    if isinstance(value, Money):
        return {"amount": str(value.amount), "currency": value.currency.code}
    if isinstance(value, Quantity):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)
