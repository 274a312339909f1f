"""Configuration: settings and structured logging."""

from src.config.logging import configure_logging, get_logger
from src.config.settings import (
    CacheSettings,
    Settings,
    StorageSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "StorageSettings",
    "CacheSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
]
