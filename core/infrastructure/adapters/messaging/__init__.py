"""Messaging adapters."""
from .noop_event_bus import NoopEventBus

__all__ = ["NoopEventBus"]
