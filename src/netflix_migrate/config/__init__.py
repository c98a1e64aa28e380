"""Configuration management."""

from .loader import load_config
from .settings import (
    AccountConfig,
    EndpointsConfig,
    ExportConfig,
    ImportConfig,
    SessionConfig,
    Settings,
    load_settings,
)

__all__ = [
    "Settings",
    "load_settings",
    "load_config",
    "AccountConfig",
    "SessionConfig",
    "EndpointsConfig",
    "ImportConfig",
    "ExportConfig",
]
