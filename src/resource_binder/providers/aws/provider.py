"""AWS provider - reads resources through the Cloud Control API."""
import json
from typing import Any, Dict, List, Optional

from resource_binder.domain.base.exceptions import ConfigurationError
from resource_binder.infrastructure.logging.logger import get_logger
from resource_binder.providers.aws.aws_client import AWSClient
from resource_binder.providers.aws.handler import CloudControlResourceHandler
from resource_binder.providers.aws.schema import object_type_from_resource_schema
from resource_binder.providers.base.configuration import ProviderConfiguration
from resource_binder.providers.base.provider import ResourceHandler, ResourceProvider

logger = get_logger(__name__)


class AWSCloudControlProvider(ResourceProvider):
    """
    AWS provider backed by Cloud Control and the CloudFormation registry.

    Any resource type the registry knows (e.g. ``AWS::S3::Bucket``) is
    supported; its schema is fetched from the registry on first use.
    """

    def __init__(self) -> None:
        super().__init__()
        self._handlers: Dict[str, ResourceHandler] = {}

    @property
    def name(self) -> str:
        return "aws"

    def _build_client_context(self, configuration: ProviderConfiguration) -> AWSClient:
        if not configuration.uses_ambient_session:
            raise ConfigurationError(
                "Client certificate credentials are not supported by the aws provider; "
                "use the ambient credential chain or a named profile"
            )
        settings = configuration.settings
        return AWSClient(
            region_name=settings.region,
            profile_name=settings.profile,
            endpoint_url=settings.endpoint_url,
            config=settings.options,
        )

    def resource_handler(self, resource_type: str) -> Optional[ResourceHandler]:
        if resource_type in self._handlers:
            return self._handlers[resource_type]

        client: Optional[AWSClient] = self.meta
        if client is None:
            raise ConfigurationError("AWS provider is not configured")

        schema_document = client.describe_resource_schema(resource_type)
        if schema_document is None:
            logger.debug("Resource type not found in registry", resource_type=resource_type)
            return None

        schema = object_type_from_resource_schema(json.loads(schema_document))
        handler = CloudControlResourceHandler(resource_type, schema)
        self._handlers[resource_type] = handler
        return handler

    def resource_types(self) -> List[str]:
        return list(self._handlers)
