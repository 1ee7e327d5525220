"""Application ports (driven side)."""
from .clock import Clock
from .pricing_service import PricingService

__all__ = ["Clock", "PricingService"]
