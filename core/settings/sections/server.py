from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from core.settings.base import section_config


class ServerSettings(BaseSettings):
    """
    HTTP server settings.
    Loaded from environment / .env with prefix ORDERS_*
    (the port also honours plain PORT).
    """

    host: str = "0.0.0.0"
    port: int = Field(default=3000, validation_alias=AliasChoices("ORDERS_PORT", "PORT"))
    log_level: str = "INFO"
    debug: bool = False

    model_config = section_config("ORDERS_")
