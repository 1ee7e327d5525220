# Settings package
from core.settings.app import AppSettings, get_app_settings
from core.settings.sections import EventBusSettings, PricingSettings, ServerSettings

__all__ = [
    "get_app_settings",
    "AppSettings",
    "EventBusSettings",
    "PricingSettings",
    "ServerSettings",
]
