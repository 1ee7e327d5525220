# core/settings/base.py
from pydantic_settings import SettingsConfigDict


def section_config(env_prefix: str) -> SettingsConfigDict:
    """Shared model_config for every settings section."""
    return SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix=env_prefix,
        extra="ignore",
    )
