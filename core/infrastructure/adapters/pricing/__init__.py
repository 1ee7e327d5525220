"""Pricing adapters."""
from .static_pricing_service import StaticPricingService

__all__ = ["StaticPricingService"]
