"""Configuration package."""

from loxrt.config.settings import RuntimeSettings, get_settings, load_settings

__all__ = [
    "RuntimeSettings",
    "get_settings",
    "load_settings",
]
