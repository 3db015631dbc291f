"""Configuration management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package settings pulled from PY_RAND_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PY_RAND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["json", "plain"] = Field(
        default="plain", description="Logging format (plain or json)"
    )

    # Diagnostics
    warn_on_system_reseed: bool = Field(
        default=True,
        description="Log a warning when a thread's shared generator is reseeded explicitly",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
