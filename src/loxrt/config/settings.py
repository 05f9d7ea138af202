"""Runtime settings."""

from __future__ import annotations

from functools import lru_cache

from loguru import logger
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    """Value model settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOXRT_",
        case_sensitive=False,
        extra="ignore",
    )

    log_filter: str = Field(default="info")
    max_render_depth: int = Field(default=64, ge=1, le=256)


def load_settings() -> RuntimeSettings:
    """Load settings from the environment and .env."""
    return RuntimeSettings()


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Settings shared by the rendering path; call ``cache_clear`` to reload.

    Invalid values in the environment fall back to the defaults so that
    rendering keeps working.
    """
    try:
        return load_settings()
    except ValidationError as exc:
        logger.warning("settings.invalid errors={}", exc.error_count())
        return RuntimeSettings.model_construct()
