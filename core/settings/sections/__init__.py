from .event_bus import EventBusSettings
from .pricing import DEFAULT_CATALOG, PricingSettings
from .server import ServerSettings

__all__ = ["DEFAULT_CATALOG", "EventBusSettings", "PricingSettings", "ServerSettings"]
