"""Configuration for the storage gateway."""

from .settings import StorageGatewaySettings, get_settings
from .logging_config import LoggingConfig, setup_logging

__all__ = [
    "StorageGatewaySettings",
    "get_settings",
    "LoggingConfig",
    "setup_logging",
]
