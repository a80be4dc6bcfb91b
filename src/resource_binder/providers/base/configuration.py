"""Per-call provider configuration."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from resource_binder.config.schemas.provider_schema import ProviderSettings
from resource_binder.domain.resource.credentials import (
    AmbientCredentials,
    CredentialDescriptor,
)


class ProviderConfiguration(BaseModel):
    """Immutable configuration handed to a freshly constructed provider.

    Built once per read from the application settings and the caller's
    credentials, then passed by value to ``ResourceProvider.configure``.
    """
    model_config = ConfigDict(frozen=True)

    settings: ProviderSettings = Field(default_factory=ProviderSettings)
    credentials: CredentialDescriptor = Field(default_factory=AmbientCredentials)

    @classmethod
    def for_call(
        cls,
        settings: Optional[ProviderSettings] = None,
        credentials: Optional[CredentialDescriptor] = None,
    ) -> "ProviderConfiguration":
        """Build a configuration, falling back to the ambient session."""
        return cls(
            settings=settings or ProviderSettings(),
            credentials=credentials or AmbientCredentials(),
        )

    @property
    def uses_ambient_session(self) -> bool:
        return isinstance(self.credentials, AmbientCredentials)
