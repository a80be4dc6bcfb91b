"""Main application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field

from resource_binder.config.schemas.logging_schema import LoggingConfig
from resource_binder.config.schemas.provider_schema import ProviderSettings
from resource_binder.config.schemas.reader_schema import ReaderConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0", description="Configuration version")
    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """Validate raw configuration data against the application schema."""
    return AppConfig.model_validate(config)
