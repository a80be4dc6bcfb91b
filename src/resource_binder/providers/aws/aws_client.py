"""AWS client management for Cloud Control reads."""
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from resource_binder.domain.base.exceptions import ConfigurationError
from resource_binder.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class AWSClient:
    """
    Client context for one AWS provider instance.

    Builds a session from the ambient credential chain (optionally a named
    profile), validates it with STS and creates the Cloud Control and
    CloudFormation registry clients handlers read with.
    """

    def __init__(
        self,
        region_name: Optional[str] = None,
        profile_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize AWS client with configuration.

        Args:
            region_name: AWS region name; the session default is used when omitted
            profile_name: Named profile from the shared credentials file
            endpoint_url: Optional endpoint override (e.g. a local emulator)
            config: Optional provider options (retry_attempts, connect_timeout_ms)

        Raises:
            ConfigurationError: If the session cannot be created or its credentials are invalid
        """
        config = config or {}
        try:
            self.session = boto3.Session(profile_name=profile_name, region_name=region_name)
        except BotoCoreError as e:
            raise ConfigurationError(f"Failed to create AWS session: {e}", cause=e) from e

        self.region_name = region_name or self.session.region_name
        if not self.region_name:
            raise ConfigurationError("No AWS region configured; set provider.region or AWS_REGION")

        self.config = Config(
            region_name=self.region_name,
            retries={
                "max_attempts": config.get("retry_attempts", 3),
                "mode": "standard",
            },
            connect_timeout=config.get("connect_timeout_ms", 10000) / 1000,
        )
        self.endpoint_url = endpoint_url

        # Validate AWS credentials
        try:
            sts = self._client("sts")
            caller = sts.get_caller_identity()
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to validate AWS credentials", error=str(e))
            raise ConfigurationError(f"Failed to validate AWS credentials: {e}", cause=e) from e

        self.account_id = caller.get("Account")
        self.cloudcontrol_client = self._client("cloudcontrol")
        self.cloudformation_client = self._client("cloudformation")
        logger.debug("AWS client configured", account_id=self.account_id, region=self.region_name)

    def _client(self, service_name: str) -> Any:
        kwargs: Dict[str, Any] = {"config": self.config}
        if self.endpoint_url:
            kwargs["endpoint_url"] = self.endpoint_url
        return self.session.client(service_name, **kwargs)

    def describe_resource_schema(self, type_name: str) -> Optional[str]:
        """Return the registry schema document for a resource type, or None if unknown."""
        try:
            response = self.cloudformation_client.describe_type(Type="RESOURCE", TypeName=type_name)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "TypeNotFoundException":
                return None
            raise
        return response.get("Schema")

    def get_resource(self, type_name: str, identifier: str) -> Optional[Dict[str, Any]]:
        """Return the resource description, or None if the resource does not exist."""
        try:
            response = self.cloudcontrol_client.get_resource(TypeName=type_name, Identifier=identifier)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "ResourceNotFoundException":
                return None
            raise
        return response.get("ResourceDescription", {})
