"""Provider port and the per-read state container."""

from .configuration import ProviderConfiguration
from .provider import ResourceHandler, ResourceProvider, StaticResourceProvider
from .resource_data import ResourceData

__all__ = [
    "ProviderConfiguration",
    "ResourceHandler",
    "ResourceProvider",
    "StaticResourceProvider",
    "ResourceData",
]
