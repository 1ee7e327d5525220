"""Currency value object (ISO 4217 code)."""
from dataclasses import dataclass
from typing import Tuple

from ..errors import InvalidCurrencyError


SUPPORTED_CURRENCIES: Tuple[str, ...] = ("USD", "EUR", "COP", "GBP", "JPY")


@dataclass(frozen=True)
class Currency:
    """
    Immutable currency code.

    Invariants:
    - 3-letter ISO 4217 code (normalized: trimmed, upper-cased)
    - Must be one of SUPPORTED_CURRENCIES
    """
    code: str

    def __post_init__(self):
        if not isinstance(self.code, str) or not self.code.strip():
            raise InvalidCurrencyError("Currency code cannot be empty")

        normalized = self.code.strip().upper()

        if len(normalized) != 3:
            raise InvalidCurrencyError("Currency code must be 3 characters (ISO 4217)")

        if normalized not in SUPPORTED_CURRENCIES:
            raise InvalidCurrencyError(
                f"Currency '{normalized}' is not supported. "
                f"Supported currencies: {', '.join(SUPPORTED_CURRENCIES)}"
            )

        object.__setattr__(self, 'code', normalized)

    @classmethod
    def create(cls, code: str) -> "Currency":
        """Build a validated Currency from raw input."""
        return cls(code)

    def __str__(self) -> str:
        return self.code
