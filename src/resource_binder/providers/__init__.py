"""Resource providers - the collaborators that read remote resource state."""

from .base import (
    ProviderConfiguration,
    ResourceData,
    ResourceHandler,
    ResourceProvider,
    StaticResourceProvider,
)
from .registry import ProviderRegistry, UnsupportedProviderError, get_provider_registry

__all__ = [
    "ProviderConfiguration",
    "ResourceData",
    "ResourceHandler",
    "ResourceProvider",
    "StaticResourceProvider",
    "ProviderRegistry",
    "UnsupportedProviderError",
    "get_provider_registry",
]
