# core/settings/app.py
from functools import lru_cache

from core.settings.sections import EventBusSettings, PricingSettings, ServerSettings


class AppSettings:
    """
    Central application settings aggregator.
    Settings are loaded lazily inside __init__
    to prevent eager evaluation at import time.
    """

    def __init__(self):
        self.server = ServerSettings()
        self.pricing = PricingSettings()
        self.event_bus = EventBusSettings()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
