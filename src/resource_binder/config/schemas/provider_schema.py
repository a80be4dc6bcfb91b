"""Provider settings schema."""
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProviderSettings(BaseModel):
    """Settings for the provider used to read resources."""
    model_config = ConfigDict(frozen=True)

    type: str = Field("azure", description="Provider type (aws, azure)")
    environment: str = Field("public", description="Cloud environment name")
    subscription_id: Optional[str] = Field(
        default_factory=lambda: os.environ.get("AZURE_SUBSCRIPTION_ID") or None,
        description="Azure subscription used as the CLI session hint",
    )
    region: Optional[str] = Field(
        default_factory=lambda: os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or None,
        description="AWS region",
    )
    profile: Optional[str] = Field(
        default_factory=lambda: os.environ.get("AWS_PROFILE") or None,
        description="AWS named profile",
    )
    endpoint_url: Optional[str] = Field(None, description="Override service endpoint")
    options: Dict[str, Any] = Field(default_factory=dict, description="Provider-specific options")

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        if not v:
            raise ValueError("Provider type must not be empty")
        return v.lower()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        return v.lower()
