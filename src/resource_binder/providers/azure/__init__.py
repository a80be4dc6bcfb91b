"""Azure provider."""

from .registration import create_azure_provider, register_azure_provider

__all__ = ["create_azure_provider", "register_azure_provider"]
