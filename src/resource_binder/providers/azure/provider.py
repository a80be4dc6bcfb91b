"""Azure provider - reads resources through Azure Resource Manager."""
from typing import List, Optional

from resource_binder.providers.azure.azure_client import AzureClient
from resource_binder.providers.azure.handlers import GenericResourceHandler, ResourceGroupHandler
from resource_binder.providers.base.configuration import ProviderConfiguration
from resource_binder.providers.base.provider import ResourceHandler, StaticResourceProvider


def default_handlers() -> List[ResourceHandler]:
    return [ResourceGroupHandler(), GenericResourceHandler()]


class AzureResourceManagerProvider(StaticResourceProvider):
    """Azure provider authenticating with the Azure CLI session or a client certificate."""

    def __init__(self, handlers: Optional[List[ResourceHandler]] = None) -> None:
        super().__init__(handlers if handlers is not None else default_handlers())

    @property
    def name(self) -> str:
        return "azure"

    def _build_client_context(self, configuration: ProviderConfiguration) -> AzureClient:
        return AzureClient(configuration)
