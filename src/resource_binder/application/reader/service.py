"""Resource state reader - configure, read, convert and normalize one resource."""
import threading
import time
from concurrent.futures import FIRST_COMPLETED, Future, wait
from typing import Any, Callable, Optional

from pydantic import ValidationError as PydanticValidationError

from resource_binder.application.conversion.converter import Document, convert
from resource_binder.application.conversion.normalizer import normalize
from resource_binder.config.schemas.app_schema import AppConfig
from resource_binder.config.schemas.provider_schema import ProviderSettings
from resource_binder.config.schemas.reader_schema import DEFAULT_CONFIGURE_TIMEOUT_SECONDS
from resource_binder.domain.base.exceptions import (
    ConfigurationCancelledError,
    ConfigurationError,
    ConfigurationTimeoutError,
    ReadFailedError,
    ResourceNotFoundError,
    StateExtractionError,
    UnsupportedResourceTypeError,
    UnsupportedValueShapeError,
    ValidationError,
)
from resource_binder.domain.resource.credentials import CredentialDescriptor
from resource_binder.domain.resource.identity import ResourceIdentity
from resource_binder.infrastructure.logging.logger import get_logger
from resource_binder.providers.base.configuration import ProviderConfiguration
from resource_binder.providers.base.provider import ResourceHandler, ResourceProvider

logger = get_logger(__name__)

# How often a pending configuration checks the caller's cancel event
_CANCEL_POLL_INTERVAL = 0.1


class ResourceStateReader:
    """
    Reads the current state of one resource as a generic document.

    Each call builds and configures its own provider instance from
    ``provider_factory``; nothing is cached between calls. A call either
    returns a fully normalized document or raises a ``ResourceReadError``
    subclass, never both.
    """

    def __init__(
        self,
        provider_factory: Callable[[], ResourceProvider],
        settings: Optional[ProviderSettings] = None,
        configure_timeout: float = DEFAULT_CONFIGURE_TIMEOUT_SECONDS,
        normalize_nested: bool = False,
    ):
        """
        Args:
            provider_factory: Builds a new, unconfigured provider per call
            settings: Provider settings shared by every call
            configure_timeout: Upper bound for provider configuration, in seconds
            normalize_nested: Also rewrite null collections inside nested objects
        """
        if configure_timeout <= 0:
            raise ValueError("configure_timeout must be positive")
        self._provider_factory = provider_factory
        self._settings = settings or ProviderSettings()
        self._configure_timeout = configure_timeout
        self._normalize_nested = normalize_nested

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        provider_factory: Optional[Callable[[], ResourceProvider]] = None,
    ) -> "ResourceStateReader":
        """Build a reader from application configuration."""
        if provider_factory is None:
            from resource_binder.providers.registry import get_provider_registry

            provider_factory = get_provider_registry().provider_factory(config.provider.type)
        return cls(
            provider_factory,
            settings=config.provider,
            configure_timeout=config.reader.configure_timeout_seconds,
            normalize_nested=config.reader.normalize_nested,
        )

    def read_resource(
        self,
        resource_type: str,
        resource_id: str,
        credentials: Optional[CredentialDescriptor] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> Document:
        """
        Read a resource and return its attributes as a generic document.

        Args:
            resource_type: Resource type name known to the provider
            resource_id: Opaque resource identifier
            credentials: Credentials for this read; None uses the ambient session
            cancel_event: Set to abandon a pending provider configuration

        Raises:
            ValidationError: If the type or id is empty
            ConfigurationError: If provider setup fails, times out or is cancelled
            UnsupportedResourceTypeError: If the provider has no handler for the type
            ReadFailedError: If the handler's read fails
            ResourceNotFoundError: If the resource no longer exists
            StateExtractionError: If the read state does not fit the schema
            UnsupportedValueShapeError: If conversion meets an unknown value variant
        """
        identity = self._identity(resource_type, resource_id)
        configuration = ProviderConfiguration.for_call(self._settings, credentials)

        provider = self._provider_factory()
        meta = self._configure(provider, configuration, identity, cancel_event)

        logger.info(
            "Reading resource",
            provider=provider.name,
            resource_type=identity.resource_type,
            resource_id=identity.id,
        )

        handler = self._resolve_handler(provider, identity)
        data = handler.new_resource_data()
        data.set_id(identity.id)

        try:
            handler.read(data, meta)
        except Exception as e:
            raise ReadFailedError(
                f"Failed to read resource {identity.resource_type}: {e}",
                resource_type=identity.resource_type,
                resource_id=identity.id,
                cause=e,
            ) from e

        if not data.id:
            raise ResourceNotFoundError(
                f"Resource {identity.resource_type} with ID {identity.id} was not found",
                resource_type=identity.resource_type,
                resource_id=identity.id,
            )

        try:
            typed_state = data.to_typed_value()
        except Exception as e:
            raise StateExtractionError(
                f"Failed to get attributes as object value: {e}",
                resource_type=identity.resource_type,
                resource_id=identity.id,
                cause=e,
            ) from e

        try:
            converted = convert(typed_state)
        except UnsupportedValueShapeError as e:
            raise UnsupportedValueShapeError(
                f"Failed to convert attributes of {identity.resource_type}: {e}",
                resource_type=identity.resource_type,
                resource_id=identity.id,
                cause=e,
            ) from e

        document = normalize(converted, handler.schema, recursive=self._normalize_nested)
        logger.debug("Read resource state", resource_id=identity.id, document=document)
        return document

    def _identity(self, resource_type: str, resource_id: str) -> ResourceIdentity:
        try:
            return ResourceIdentity(resource_type=resource_type, id=resource_id)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid resource identity ({resource_type!r}, {resource_id!r})",
                details=e.errors(include_url=False),
            ) from e

    def _configure(
        self,
        provider: ResourceProvider,
        configuration: ProviderConfiguration,
        identity: ResourceIdentity,
        cancel_event: Optional[threading.Event],
    ) -> Any:
        """Run provider configuration on a worker thread within the time bound.

        The worker is a daemon thread: a configuration abandoned on timeout or
        cancellation never keeps the process alive.
        """
        context = {"resource_type": identity.resource_type, "resource_id": identity.id}
        future: "Future[Any]" = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                future.set_result(provider.configure(configuration))
            except Exception as e:
                future.set_exception(e)

        threading.Thread(target=run, name="provider-configure", daemon=True).start()
        try:
            deadline = time.monotonic() + self._configure_timeout
            while not future.done():
                if cancel_event is not None and cancel_event.is_set():
                    raise ConfigurationCancelledError(
                        f"Provider {provider.name} configuration was cancelled", **context
                    )
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise ConfigurationTimeoutError(
                        f"Provider {provider.name} failed to configure within "
                        f"{self._configure_timeout:g} seconds",
                        **context,
                    )
                wait([future], timeout=min(remaining, _CANCEL_POLL_INTERVAL), return_when=FIRST_COMPLETED)

            error = future.exception()
            if error is not None:
                logger.error("Provider failed to configure", provider=provider.name, error=str(error))
                raise ConfigurationError(
                    f"Provider {provider.name} failed to configure: {error}", cause=error, **context
                ) from error
            meta = future.result()
        finally:
            future.cancel()

        if meta is None:
            raise ConfigurationError(
                f"Provider {provider.name} returned no client context", **context
            )
        return meta

    def _resolve_handler(self, provider: ResourceProvider, identity: ResourceIdentity) -> ResourceHandler:
        try:
            handler = provider.resource_handler(identity.resource_type)
        except Exception as e:
            raise ReadFailedError(
                f"Failed to resolve resource type {identity.resource_type}: {e}",
                resource_type=identity.resource_type,
                resource_id=identity.id,
                cause=e,
            ) from e
        if handler is None:
            raise UnsupportedResourceTypeError(
                f"Resource type {identity.resource_type} unsupported by provider {provider.name}",
                resource_type=identity.resource_type,
                resource_id=identity.id,
            )
        return handler


def read_resource(
    resource_type: str,
    resource_id: str,
    credentials: Optional[CredentialDescriptor] = None,
    config: Optional[AppConfig] = None,
) -> Document:
    """Read one resource using the provider named by the application config."""
    return ResourceStateReader.from_config(config or AppConfig()).read_resource(
        resource_type, resource_id, credentials
    )
