"""
Money value object.

CRITICAL: Amounts are always Decimal, never float!
Floats passed in are converted through str() first so that 0.1 stays 0.1.
"""
from dataclasses import dataclass
from decimal import (
    Context,
    Decimal,
    InvalidOperation,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
)
from typing import Union

from ..errors import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidFactorError,
    NegativeResultError,
)
from .currency import Currency


Numeric = Union[int, float, str, Decimal]

CENT = Decimal("0.01")

# Unbounded precision: sums, products and rounding never lose digits
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def _to_decimal(value: Numeric) -> Decimal:
    """Convert raw numeric input to Decimal; raises TypeError/InvalidOperation on junk."""
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric amount")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float, str)):
        return Decimal(str(value).strip())
    raise TypeError(f"Unsupported numeric type: {type(value).__name__}")


def round_to_cents(value: Decimal) -> Decimal:
    """Round half away from zero to 2 decimal places."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP, context=_EXACT)


@dataclass(frozen=True)
class Money:
    """
    Immutable non-negative monetary amount with currency.

    Invariants:
    - Amount is finite and >= 0
    - Amount has 2 decimal places (rounded on construction)
    - Arithmetic and comparison only between equal currencies
    """
    amount: Decimal
    currency: Currency

    def __post_init__(self):
        try:
            amount = _to_decimal(self.amount)
        except (TypeError, ValueError, InvalidOperation):
            raise InvalidAmountError(f"Money amount must be a number, got: {self.amount!r}")

        if not amount.is_finite():
            raise InvalidAmountError("Money amount must be a finite number")

        if amount < 0:
            raise InvalidAmountError("Money amount cannot be negative")

        # copy_abs() turns -0 into 0; anything truly negative was rejected above
        object.__setattr__(self, 'amount', round_to_cents(amount).copy_abs())

    @classmethod
    def create(cls, amount: Numeric, currency: Currency) -> "Money":
        """Build a validated Money, rounding amount to cents."""
        return cls(amount=amount, currency=currency)

    @classmethod
    def zero(cls, currency: Currency) -> "Money":
        return cls(amount=Decimal("0"), currency=currency)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, other: "Money") -> "Money":
        """Add two Money objects (must have same currency)."""
        self._ensure_same_currency(other)
        return Money(amount=_EXACT.add(self.amount, other.amount), currency=self.currency)

    def subtract(self, other: "Money") -> "Money":
        """
        Subtract other from this amount.

        Raises:
            CurrencyMismatchError: If currencies differ
            NegativeResultError: If the result would be below zero
        """
        self._ensure_same_currency(other)
        result = _EXACT.subtract(self.amount, other.amount)
        if result < 0:
            raise NegativeResultError("Subtraction would result in negative amount")
        return Money(amount=result, currency=self.currency)

    def multiply(self, factor: Numeric) -> "Money":
        """Multiply by a non-negative finite scalar; result rounded to cents."""
        try:
            decimal_factor = _to_decimal(factor)
        except (TypeError, ValueError, InvalidOperation):
            raise InvalidFactorError(
                f"Multiplication factor must be a number, got: {factor!r}"
            )

        if not decimal_factor.is_finite() or decimal_factor < 0:
            raise InvalidFactorError(
                "Multiplication factor must be a non-negative finite number"
            )

        return Money(
            amount=_EXACT.multiply(self.amount, decimal_factor), currency=self.currency
        )

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)

    def __mul__(self, factor: Numeric) -> "Money":
        return self.multiply(factor)

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def is_greater_than(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount > other.amount

    def is_less_than(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount < other.amount

    def is_zero(self) -> bool:
        return self.amount == 0

    def _ensure_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot perform operation between different currencies: "
                f"{self.currency.code} and {other.currency.code}"
            )

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency.code}"
