"""Environment-driven settings (prefix ``RESOURCEKIT_``)."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RESOURCEKIT_", case_sensitive=False)

    # JSON output
    json_indent: int | None = None
    json_ensure_ascii: bool = False

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["text", "json"] = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
