"""Configuration loader - reads YAML or JSON files into ``AppConfig``."""
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from resource_binder.config.schemas.app_schema import AppConfig
from resource_binder.config.utils.env_expansion import expand_config_env_vars
from resource_binder.domain.base.exceptions import ResourceBinderError

CONFIG_PATH_ENV = "RESOURCE_BINDER_CONFIG"


class InvalidConfigurationError(ResourceBinderError):
    """Raised when a configuration file cannot be read or is invalid."""
    pass


class ConfigurationLoader:
    """
    Loads application configuration.

    Resolution order: explicit path, then the ``RESOURCE_BINDER_CONFIG``
    environment variable, then built-in defaults.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or os.environ.get(CONFIG_PATH_ENV)

    def load(self) -> AppConfig:
        """
        Load and validate configuration.

        Raises:
            InvalidConfigurationError: If the file is unreadable or invalid
        """
        raw = self.load_raw()
        try:
            return AppConfig.model_validate(raw)
        except PydanticValidationError as e:
            raise InvalidConfigurationError(
                f"Invalid configuration in {self.config_path or 'defaults'}",
                details=e.errors(include_url=False),
            ) from e

    def load_raw(self) -> Dict[str, Any]:
        if not self.config_path:
            return {}

        path = Path(self.config_path)
        if not path.is_file():
            raise InvalidConfigurationError(f"Configuration file not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
            if path.suffix.lower() == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise InvalidConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvalidConfigurationError(f"Configuration file {path} must contain a mapping")
        return expand_config_env_vars(data)


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load application configuration from a file or defaults."""
    return ConfigurationLoader(config_path).load()
