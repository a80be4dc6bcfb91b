"""AWS Provider Registration - Register AWS provider with the provider registry."""
from typing import TYPE_CHECKING, Optional

# Use TYPE_CHECKING to avoid importing the registry at module load
if TYPE_CHECKING:
    from resource_binder.providers.registry import ProviderRegistry


def create_aws_provider() -> "AWSCloudControlProvider":
    """Create a new, unconfigured AWS provider."""
    from resource_binder.providers.aws.provider import AWSCloudControlProvider

    return AWSCloudControlProvider()


def register_aws_provider(registry: Optional["ProviderRegistry"] = None) -> None:
    """Register AWS provider with the provider registry.

    Args:
        registry: Provider registry instance (optional)
    """
    if registry is None:
        from resource_binder.providers.registry import ProviderRegistry

        registry = ProviderRegistry.get_instance()

    registry.register_provider(
        "aws",
        create_aws_provider,
        description="AWS Cloud Control API",
    )
