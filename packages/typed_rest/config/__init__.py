"""Public API for typed REST configuration."""

from .loader import load_settings
from .models import DEFAULT_CONFIG_PATH, HttpSettings, LoggingSettings, TypedRestSettings

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "HttpSettings",
    "LoggingSettings",
    "TypedRestSettings",
    "load_settings",
]
