"""Resource state reader configuration schema."""
from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIGURE_TIMEOUT_SECONDS = 300.0


class ReaderConfig(BaseModel):
    """Configuration for resource state reads."""

    configure_timeout_seconds: float = Field(
        DEFAULT_CONFIGURE_TIMEOUT_SECONDS,
        description="Upper bound for provider configuration, in seconds",
    )
    normalize_nested: bool = Field(
        False,
        description="Also rewrite null collections inside nested objects",
    )

    @field_validator("configure_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Configure timeout must be positive")
        return v
