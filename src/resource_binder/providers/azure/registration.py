"""Azure Provider Registration - Register Azure provider with the provider registry."""
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from resource_binder.providers.registry import ProviderRegistry


def create_azure_provider() -> "AzureResourceManagerProvider":
    """Create a new, unconfigured Azure provider."""
    from resource_binder.providers.azure.provider import AzureResourceManagerProvider

    return AzureResourceManagerProvider()


def register_azure_provider(registry: Optional["ProviderRegistry"] = None) -> None:
    """Register Azure provider with the provider registry.

    Args:
        registry: Provider registry instance (optional)
    """
    if registry is None:
        from resource_binder.providers.registry import ProviderRegistry

        registry = ProviderRegistry.get_instance()

    registry.register_provider(
        "azure",
        create_azure_provider,
        description="Azure Resource Manager",
    )
