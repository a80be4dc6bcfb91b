"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .logging_schema import LogDestination, LoggingConfig
from .provider_schema import ProviderSettings
from .reader_schema import DEFAULT_CONFIGURE_TIMEOUT_SECONDS, ReaderConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "LogDestination",
    "ProviderSettings",
    "ReaderConfig",
    "DEFAULT_CONFIGURE_TIMEOUT_SECONDS",
]
