"""Tests for the Azure Resource Manager provider."""
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from azure.core.exceptions import ClientAuthenticationError
from azure.core.exceptions import ResourceNotFoundError as AzureResourceNotFoundError

from resource_binder.application.reader import ResourceStateReader
from resource_binder.config.schemas import ProviderSettings
from resource_binder.domain.base.exceptions import (
    ConfigurationError,
    ReadFailedError,
    ResourceNotFoundError,
)
from resource_binder.domain.resource import ClientCertificateCredentials
from resource_binder.providers.azure.azure_client import (
    AzureClient,
    environment_from_name,
)
from resource_binder.providers.azure.handlers import GenericResourceHandler, ResourceGroupHandler
from resource_binder.providers.azure.provider import AzureResourceManagerProvider
from resource_binder.providers.base import ProviderConfiguration

SUBSCRIPTION = "00000000-0000-0000-0000-000000000000"
GROUP_ID = f"/subscriptions/{SUBSCRIPTION}/resourceGroups/example"
ACCOUNT_ID = f"{GROUP_ID}/providers/Microsoft.Storage/storageAccounts/examplesa"
CONTAINER_ID = f"{ACCOUNT_ID}/blobServices/default"

CLIENT_MODULE = "resource_binder.providers.azure.azure_client"


def _settings(**kwargs):
    values = {"type": "azure", "subscription_id": None}
    values.update(kwargs)
    return ProviderSettings(**values)


def _certificate():
    return ClientCertificateCredentials(
        client_id="app-id", client_certificate_data=b"PEM", tenant_id="tenant-id", certificate_password="pw"
    )


def _resource_group(tags=None):
    return SimpleNamespace(id=GROUP_ID, name="example", location="westeurope", managed_by=None, tags=tags)


@pytest.fixture
def cli_credential():
    with patch(f"{CLIENT_MODULE}.AzureCliCredential") as credential_class:
        yield credential_class


@pytest.fixture
def management_client():
    with patch(f"{CLIENT_MODULE}.ResourceManagementClient") as client_class:
        yield client_class


@pytest.mark.unit
@pytest.mark.azure
class TestAzureClient:
    """Test credential construction and client caching."""

    def test_ambient_session_uses_cli_credential(self, cli_credential):
        client = AzureClient(ProviderConfiguration.for_call(_settings()))

        assert client.credential is cli_credential.return_value
        cli_credential.return_value.get_token.assert_called_once_with("https://management.azure.com/.default")

    def test_certificate_credentials(self):
        with patch(f"{CLIENT_MODULE}.CertificateCredential") as certificate_class:
            AzureClient(ProviderConfiguration.for_call(_settings(environment="china"), _certificate()))

        certificate_class.assert_called_once_with(
            "tenant-id",
            "app-id",
            certificate_data=b"PEM",
            password="pw",
            authority="login.chinacloudapi.cn",
        )
        certificate_class.return_value.get_token.assert_called_once_with(
            "https://management.chinacloudapi.cn/.default"
        )

    def test_authentication_failure(self, cli_credential):
        cli_credential.return_value.get_token.side_effect = ClientAuthenticationError("Please run 'az login'")

        with pytest.raises(ConfigurationError) as exc_info:
            AzureClient(ProviderConfiguration.for_call(_settings()))

        assert "az login" in str(exc_info.value)

    def test_unknown_environment(self, cli_credential):
        with pytest.raises(ConfigurationError):
            AzureClient(ProviderConfiguration.for_call(_settings(environment="mars")))
        cli_credential.assert_not_called()

    def test_environment_lookup_case_insensitive(self):
        assert environment_from_name("USGovernment").resource_manager == "https://management.usgovcloudapi.net"

    def test_resource_client_cached_per_subscription(self, cli_credential, management_client):
        client = AzureClient(ProviderConfiguration.for_call(_settings(subscription_id="default-sub")))

        first = client.resource_client(SUBSCRIPTION)
        assert client.resource_client(SUBSCRIPTION) is first
        client.resource_client()

        assert management_client.call_count == 2
        management_client.assert_any_call(
            cli_credential.return_value,
            "default-sub",
            base_url="https://management.azure.com",
            credential_scopes=["https://management.azure.com/.default"],
        )

    def test_resource_client_requires_subscription(self, cli_credential):
        client = AzureClient(ProviderConfiguration.for_call(_settings()))
        with pytest.raises(ConfigurationError):
            client.resource_client()


@pytest.mark.unit
@pytest.mark.azure
class TestResourceGroupHandler:
    def setup_method(self):
        self.handler = ResourceGroupHandler()
        self.client = MagicMock()
        self.resource_groups = self.client.resource_client.return_value.resource_groups

    def _data(self, resource_id):
        data = self.handler.new_resource_data()
        data.set_id(resource_id)
        return data

    def test_read(self):
        self.resource_groups.get.return_value = _resource_group(tags={"env": "dev"})
        data = self._data(GROUP_ID)

        self.handler.read(data, self.client)

        self.client.resource_client.assert_called_once_with(SUBSCRIPTION)
        self.resource_groups.get.assert_called_once_with("example")
        assert data.state() == {
            "id": GROUP_ID,
            "name": "example",
            "location": "westeurope",
            "managed_by": None,
            "tags": {"env": "dev"},
        }

    def test_not_found_clears_id(self):
        self.resource_groups.get.side_effect = AzureResourceNotFoundError("gone")
        data = self._data(GROUP_ID)

        self.handler.read(data, self.client)

        assert data.id == ""

    def test_rejects_provider_resource_id(self):
        with pytest.raises(ValueError):
            self.handler.read(self._data(ACCOUNT_ID), self.client)


@pytest.mark.unit
@pytest.mark.azure
class TestGenericResourceHandler:
    def setup_method(self):
        self.handler = GenericResourceHandler()
        self.client = MagicMock()
        self.client.api_versions = {}
        self.resource_client = self.client.resource_client.return_value
        self.resource_client.providers.get.return_value = SimpleNamespace(
            resource_types=[
                SimpleNamespace(resource_type="storageAccounts", api_versions=["2024-01-01-preview", "2023-05-01"]),
                SimpleNamespace(resource_type="storageAccounts/blobServices", api_versions=["2023-01-01"]),
            ]
        )
        self.resource_client.resources.get_by_id.return_value.as_dict.return_value = {
            "id": ACCOUNT_ID,
            "name": "examplesa",
            "type": "Microsoft.Storage/storageAccounts",
            "location": "westeurope",
            "kind": "StorageV2",
            "sku": {"name": "Standard_LRS", "tier": "Standard"},
            "properties": {"accessTier": "Hot"},
            "extended_location": None,
        }

    def _data(self, resource_id):
        data = self.handler.new_resource_data()
        data.set_id(resource_id)
        return data

    def test_read_uses_newest_stable_api_version(self):
        data = self._data(ACCOUNT_ID)

        self.handler.read(data, self.client)

        self.resource_client.providers.get.assert_called_once_with("Microsoft.Storage")
        self.resource_client.resources.get_by_id.assert_called_once_with(ACCOUNT_ID, "2023-05-01")
        state = data.state()
        assert state["kind"] == "StorageV2"
        assert state["sku"] == {"name": "Standard_LRS", "tier": "Standard"}
        assert state["properties"] == '{"accessTier":"Hot"}'
        assert "extended_location" not in state

    def test_child_resource_type(self):
        self.handler.read(self._data(CONTAINER_ID), self.client)

        self.resource_client.resources.get_by_id.assert_called_once_with(CONTAINER_ID, "2023-01-01")

    def test_configured_api_version_wins(self):
        self.client.api_versions = {"Microsoft.Storage/storageAccounts": "2021-09-01"}

        self.handler.read(self._data(ACCOUNT_ID), self.client)

        self.resource_client.providers.get.assert_not_called()
        self.resource_client.resources.get_by_id.assert_called_once_with(ACCOUNT_ID, "2021-09-01")

    def test_unknown_resource_type(self):
        self.resource_client.providers.get.return_value = SimpleNamespace(resource_types=[])
        with pytest.raises(ValueError):
            self.handler.read(self._data(ACCOUNT_ID), self.client)

    def test_rejects_resource_group_id(self):
        with pytest.raises(ValueError):
            self.handler.read(self._data(GROUP_ID), self.client)


@pytest.mark.unit
@pytest.mark.azure
class TestAzureResourceManagerProvider:
    def test_default_handlers(self):
        provider = AzureResourceManagerProvider()

        assert provider.name == "azure"
        assert provider.resource_types() == ["azurerm_resource_group", "azurerm_resource"]
        assert provider.resource_handler("azurerm_virtual_network") is None

    def test_get_provider_info(self):
        info = AzureResourceManagerProvider().get_provider_info()
        assert info["configured"] is False


@pytest.mark.integration
@pytest.mark.azure
class TestAzureReadThroughReader:
    """End-to-end reads with the Azure SDK mocked out."""

    def _reader(self):
        return ResourceStateReader(AzureResourceManagerProvider, settings=_settings())

    def test_read_resource_group(self, cli_credential, management_client):
        management_client.return_value.resource_groups.get.return_value = _resource_group()

        document = self._reader().read_resource("azurerm_resource_group", GROUP_ID)

        assert document == {
            "id": GROUP_ID,
            "name": "example",
            "location": "westeurope",
            "managed_by": None,
            "tags": None,
        }

    def test_read_missing_resource_group(self, cli_credential, management_client):
        management_client.return_value.resource_groups.get.side_effect = AzureResourceNotFoundError("gone")

        with pytest.raises(ResourceNotFoundError):
            self._reader().read_resource("azurerm_resource_group", GROUP_ID)

    def test_malformed_id_is_read_failure(self, cli_credential, management_client):
        with pytest.raises(ReadFailedError):
            self._reader().read_resource("azurerm_resource_group", "not-an-arm-id")

    def test_authentication_failure(self, cli_credential):
        cli_credential.return_value.get_token.side_effect = ClientAuthenticationError("expired")

        with pytest.raises(ConfigurationError):
            self._reader().read_resource("azurerm_resource_group", GROUP_ID)
