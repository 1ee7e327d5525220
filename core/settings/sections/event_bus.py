from typing import Literal

from pydantic_settings import BaseSettings

from core.settings.base import section_config


class EventBusSettings(BaseSettings):
    """
    Event bus backend selection.
    EVENT_BUS_BACKEND=memory keeps and dispatches events in-process,
    EVENT_BUS_BACKEND=noop drops them.
    """

    backend: Literal["memory", "noop"] = "memory"

    model_config = section_config("EVENT_BUS_")
