"""Configuration package with clean public API."""

from .loader import ConfigurationLoader, InvalidConfigurationError, load_config
from .schemas import (
    AppConfig,
    LogDestination,
    LoggingConfig,
    ProviderSettings,
    ReaderConfig,
    validate_config,
)

__all__ = [
    "AppConfig",
    "validate_config",
    "ProviderSettings",
    "ReaderConfig",
    "LoggingConfig",
    "LogDestination",
    "ConfigurationLoader",
    "InvalidConfigurationError",
    "load_config",
]
