"""SKU (Stock Keeping Unit) value object."""
import re
from dataclasses import dataclass

from ..errors import InvalidSkuError


SKU_MIN_LENGTH = 3
SKU_MAX_LENGTH = 50
_SKU_PATTERN = re.compile(r"^[A-Z0-9-]+$")


@dataclass(frozen=True)
class Sku:
    """
    Product code.

    Trimmed, then checked for length, then upper-cased:
    - 3 to 50 characters after trimming
    - Only A-Z, 0-9 and '-' after upper-casing

    Examples:
    - LAPTOP-15
    - MOUSE-USB
    """
    code: str

    def __post_init__(self):
        if not isinstance(self.code, str) or not self.code.strip():
            raise InvalidSkuError("SKU code cannot be empty")

        trimmed = self.code.strip()

        # Length is measured before upper-casing, which can expand characters
        if len(trimmed) < SKU_MIN_LENGTH:
            raise InvalidSkuError(
                f"SKU code must be at least {SKU_MIN_LENGTH} characters: {trimmed}"
            )

        if len(trimmed) > SKU_MAX_LENGTH:
            raise InvalidSkuError(
                f"SKU code cannot exceed {SKU_MAX_LENGTH} characters: {trimmed}"
            )

        normalized = trimmed.upper()

        if not _SKU_PATTERN.match(normalized):
            raise InvalidSkuError(
                f"SKU code may only contain letters, digits and hyphens: {normalized}"
            )

        object.__setattr__(self, 'code', normalized)

    @classmethod
    def create(cls, code: str) -> "Sku":
        return cls(code)

    def __str__(self) -> str:
        return self.code
