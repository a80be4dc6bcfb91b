"""Azure client management for Resource Manager reads."""
import threading
from typing import Any, Dict, NamedTuple, Optional

from azure.core.exceptions import AzureError
from azure.identity import AzureAuthorityHosts, AzureCliCredential, CertificateCredential
from azure.mgmt.resource import ResourceManagementClient

from resource_binder.domain.base.exceptions import ConfigurationError
from resource_binder.domain.resource.credentials import ClientCertificateCredentials
from resource_binder.infrastructure.logging.logger import get_logger
from resource_binder.providers.base.configuration import ProviderConfiguration

logger = get_logger(__name__)


class AzureEnvironment(NamedTuple):
    name: str
    authority_host: str
    resource_manager: str

    @property
    def scope(self) -> str:
        return f"{self.resource_manager}/.default"


ENVIRONMENTS: Dict[str, AzureEnvironment] = {
    "public": AzureEnvironment(
        "public", AzureAuthorityHosts.AZURE_PUBLIC_CLOUD, "https://management.azure.com"
    ),
    "usgovernment": AzureEnvironment(
        "usgovernment", AzureAuthorityHosts.AZURE_GOVERNMENT, "https://management.usgovcloudapi.net"
    ),
    "china": AzureEnvironment(
        "china", AzureAuthorityHosts.AZURE_CHINA, "https://management.chinacloudapi.cn"
    ),
}


def environment_from_name(name: str) -> AzureEnvironment:
    """
    Look up a cloud environment by name.

    Raises:
        ConfigurationError: If the environment is unknown
    """
    environment = ENVIRONMENTS.get(name.lower())
    if environment is None:
        raise ConfigurationError(
            f"Unknown Azure environment '{name}'. Available environments: {', '.join(ENVIRONMENTS)}"
        )
    return environment


class AzureClient:
    """
    Client context for one Azure provider instance.

    Holds the credential built for this read and lazily creates one Resource
    Manager client per subscription the handlers touch.
    """

    def __init__(self, configuration: ProviderConfiguration):
        """
        Build and validate the credential described by ``configuration``.

        Raises:
            ConfigurationError: If the environment is unknown or authentication fails
        """
        settings = configuration.settings
        self.environment = environment_from_name(settings.environment)
        self.default_subscription_id = settings.subscription_id
        self.api_versions: Dict[str, str] = dict(settings.options.get("api_versions") or {})
        self.credential = self._build_credential(configuration)
        self._clients: Dict[str, ResourceManagementClient] = {}
        self._clients_lock = threading.Lock()

        try:
            self.credential.get_token(self.environment.scope)
        except AzureError as e:
            logger.error("Failed to authenticate with Azure", error=str(e))
            raise ConfigurationError(f"Failed to authenticate with Azure: {e}", cause=e) from e
        logger.debug(
            "Azure client configured",
            environment=self.environment.name,
            ambient=configuration.uses_ambient_session,
        )

    def _build_credential(self, configuration: ProviderConfiguration) -> Any:
        credentials = configuration.credentials
        if isinstance(credentials, ClientCertificateCredentials):
            return CertificateCredential(
                credentials.tenant_id,
                credentials.client_id,
                certificate_data=credentials.client_certificate_data,
                password=credentials.certificate_password,
                authority=self.environment.authority_host,
            )
        return AzureCliCredential()

    def resource_client(self, subscription_id: Optional[str] = None) -> ResourceManagementClient:
        """
        Return the Resource Manager client for a subscription.

        Raises:
            ConfigurationError: If no subscription is given or configured
        """
        subscription_id = subscription_id or self.default_subscription_id
        if not subscription_id:
            raise ConfigurationError("No Azure subscription given; set provider.subscription_id")
        with self._clients_lock:
            client = self._clients.get(subscription_id)
            if client is None:
                client = ResourceManagementClient(
                    self.credential,
                    subscription_id,
                    base_url=self.environment.resource_manager,
                    credential_scopes=[self.environment.scope],
                )
                self._clients[subscription_id] = client
        return client
