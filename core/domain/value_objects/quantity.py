"""Quantity value object."""
from dataclasses import dataclass

from ..errors import InvalidQuantityError


MAX_QUANTITY = 10_000


@dataclass(frozen=True)
class Quantity:
    """Positive whole number of units, capped at MAX_QUANTITY."""
    value: int

    def __post_init__(self):
        value = self.value

        # bool is an int subclass but never a quantity
        if isinstance(value, bool):
            raise InvalidQuantityError(f"Quantity must be an integer, got: {value!r}")

        if isinstance(value, float):
            if not value.is_integer():
                raise InvalidQuantityError(f"Quantity must be an integer, got: {value!r}")
            value = int(value)
            object.__setattr__(self, 'value', value)

        if not isinstance(value, int):
            raise InvalidQuantityError(f"Quantity must be an integer, got: {value!r}")

        if value <= 0:
            raise InvalidQuantityError("Quantity must be greater than zero")

        if value > MAX_QUANTITY:
            raise InvalidQuantityError(f"Quantity cannot exceed {MAX_QUANTITY}")

    @classmethod
    def create(cls, value: int) -> "Quantity":
        return cls(value)

    def add(self, other: "Quantity") -> "Quantity":
        """Sum two quantities; the result is validated against the same cap."""
        return Quantity(self.value + other.value)

    def __add__(self, other: "Quantity") -> "Quantity":
        return self.add(other)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
