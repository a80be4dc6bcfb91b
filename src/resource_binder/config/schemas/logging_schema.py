"""Logging configuration schema."""
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDERR = "stderr"
    BOTH = "both"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Log level")
    destination: LogDestination = Field(LogDestination.STDERR, description="Where logs are written")
    file_path: str = Field("logs/resource_binder.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated log files to keep")
    json_format: bool = Field(False, description="Render log lines as JSON")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Value must not be negative")
        return v
