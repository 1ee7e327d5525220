"""Identifier value objects (UUID v4 strings)."""
import re
from dataclasses import dataclass
from uuid import uuid4

from ..errors import InvalidIdentifierError


_UUID_V4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class _UuidIdentifier:
    """
    Opaque UUID v4 identifier.

    Only used for equality and lookup; never parsed further.
    """
    value: str

    def __post_init__(self):
        label = self.__class__.__name__

        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidIdentifierError(f"{label} cannot be empty")

        trimmed = self.value.strip()
        if not _UUID_V4_PATTERN.match(trimmed):
            raise InvalidIdentifierError(f"{label} must be a valid UUID v4 format")

        object.__setattr__(self, 'value', trimmed)

    @classmethod
    def create(cls, value: str):
        return cls(value)

    @classmethod
    def generate(cls):
        """Generate a new random identifier."""
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OrderId(_UuidIdentifier):
    """Unique identifier of an Order aggregate."""


@dataclass(frozen=True)
class CustomerId(_UuidIdentifier):
    """Unique identifier of the customer placing an order."""
