from decimal import Decimal
from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings

from core.settings.base import section_config


DEFAULT_CATALOG: Dict[str, Dict[str, Decimal]] = {
    "LAPTOP-001": {"USD": Decimal("999.99"), "EUR": Decimal("899.99")},
    "MOUSE-001": {"USD": Decimal("29.99")},
    "KEYBOARD-001": {"USD": Decimal("79.99")},
}


class PricingSettings(BaseSettings):
    """
    Static price catalog.
    PRICING_CATALOG takes a JSON object: {"SKU": {"USD": "9.99"}}
    """

    catalog: Dict[str, Dict[str, Decimal]] = Field(
        default_factory=lambda: {sku: dict(prices) for sku, prices in DEFAULT_CATALOG.items()}
    )

    model_config = section_config("PRICING_")
