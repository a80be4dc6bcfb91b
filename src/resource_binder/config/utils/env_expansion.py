"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any

# ${VAR}, ${VAR:default} or $VAR
_ENV_PATTERN = re.compile(r"\$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}|\$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)")


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variable references in a value.

    Strings are expanded in place; dicts and lists are expanded recursively.
    References to unset variables without a default are left as written.
    """
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_replace, value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: dict) -> dict:
    """Expand every string value of a configuration mapping."""
    return expand_env_vars(config)


def _replace(match: "re.Match[str]") -> str:
    name = match.group("braced") or match.group("bare")
    if name in os.environ:
        return os.environ[name]
    default = match.group("default")
    if default is not None:
        return default
    return match.group(0)
