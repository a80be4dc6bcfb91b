"""Provider port - the collaborator that configures clients and reads resources."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from resource_binder.domain.schema.types import ObjectType
from resource_binder.providers.base.configuration import ProviderConfiguration
from resource_binder.providers.base.resource_data import ResourceData


class ResourceHandler(ABC):
    """Reads one resource type into a ``ResourceData`` container."""

    #: Drop attributes the schema does not declare instead of failing
    ignore_unknown_attributes: bool = False

    @property
    @abstractmethod
    def resource_type(self) -> str:
        """Resource type name this handler reads."""

    @property
    @abstractmethod
    def schema(self) -> ObjectType:
        """Object schema implied by the resource type."""

    @abstractmethod
    def read(self, data: ResourceData, meta: Any) -> None:
        """
        Populate ``data`` from the remote system.

        Args:
            data: State container with the resource id already set
            meta: Client context returned by ``ResourceProvider.configure``

        Raises:
            Exception: Any failure; the caller classifies it as a failed read
        """

    def new_resource_data(self) -> ResourceData:
        return ResourceData(self.schema, ignore_unknown_attributes=self.ignore_unknown_attributes)


class ResourceProvider(ABC):
    """
    A cloud provider able to read resource state.

    Instances hold per-call state (the configured client context) and must not
    be shared between concurrent reads; build one instance per read.
    """

    def __init__(self) -> None:
        self._meta: Any = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider type name."""

    @abstractmethod
    def _build_client_context(self, configuration: ProviderConfiguration) -> Any:
        """Authenticate and build the client context handlers read with."""

    @abstractmethod
    def resource_handler(self, resource_type: str) -> Optional[ResourceHandler]:
        """Return the handler for a resource type, or None when unsupported."""

    def resource_types(self) -> List[str]:
        """Resource types known without contacting the remote system."""
        return []

    def configure(self, configuration: ProviderConfiguration) -> Any:
        """Configure this instance and return its client context."""
        self._meta = self._build_client_context(configuration)
        return self._meta

    @property
    def meta(self) -> Any:
        """Client context, or None before ``configure`` succeeds."""
        return self._meta

    def get_provider_info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "configured": self._meta is not None,
            "resource_types": self.resource_types(),
        }


class StaticResourceProvider(ResourceProvider):
    """Provider whose handlers are registered up front in a name-keyed map."""

    def __init__(self, handlers: Optional[List[ResourceHandler]] = None) -> None:
        super().__init__()
        self._handlers: Dict[str, ResourceHandler] = {}
        for handler in handlers or []:
            self.register_handler(handler)

    def register_handler(self, handler: ResourceHandler) -> None:
        if handler.resource_type in self._handlers:
            raise ValueError(f"Resource type '{handler.resource_type}' is already registered")
        self._handlers[handler.resource_type] = handler

    def resource_handler(self, resource_type: str) -> Optional[ResourceHandler]:
        return self._handlers.get(resource_type)

    def resource_types(self) -> List[str]:
        return list(self._handlers)
