"""
Domain errors.

Every invariant violation in the domain layer raises a DomainError
subclass. Callers branch on the class (or on ``kind``); ``message`` is
kept for diagnostics only.

CRITICAL: This file must contain ZERO imports from:
- pydantic
- fastapi
"""
from enum import Enum


class DomainErrorKind(str, Enum):
    """Distinguishable kinds of domain failures."""

    # Value object construction
    INVALID_CURRENCY = "INVALID_CURRENCY"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_SKU = "INVALID_SKU"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"

    # Money operations
    CURRENCY_MISMATCH = "CURRENCY_MISMATCH"
    NEGATIVE_RESULT = "NEGATIVE_RESULT"
    INVALID_FACTOR = "INVALID_FACTOR"

    # Order business rules
    DUPLICATE_SKU = "DUPLICATE_SKU"
    ITEM_LIMIT_EXCEEDED = "ITEM_LIMIT_EXCEEDED"


class DomainError(ValueError):
    """Base class for all domain rule violations."""

    kind: DomainErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value}, message={self.message!r})"


class InvalidCurrencyError(DomainError):
    kind = DomainErrorKind.INVALID_CURRENCY


class InvalidAmountError(DomainError):
    kind = DomainErrorKind.INVALID_AMOUNT


class InvalidSkuError(DomainError):
    kind = DomainErrorKind.INVALID_SKU


class InvalidQuantityError(DomainError):
    kind = DomainErrorKind.INVALID_QUANTITY


class InvalidIdentifierError(DomainError):
    kind = DomainErrorKind.INVALID_IDENTIFIER


class CurrencyMismatchError(DomainError):
    """Raised when two amounts (or an item and its order) differ in currency."""

    kind = DomainErrorKind.CURRENCY_MISMATCH


class NegativeResultError(DomainError):
    kind = DomainErrorKind.NEGATIVE_RESULT


class InvalidFactorError(DomainError):
    kind = DomainErrorKind.INVALID_FACTOR


class DuplicateSkuError(DomainError):
    """Raised when an order already holds an item with the same SKU."""

    kind = DomainErrorKind.DUPLICATE_SKU


class ItemLimitExceededError(DomainError):
    """Raised when an order already holds the maximum number of items."""

    kind = DomainErrorKind.ITEM_LIMIT_EXCEEDED
