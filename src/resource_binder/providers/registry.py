"""Provider Registry - Registry pattern for provider factories.

New providers are added by registering a factory; the reader never branches on
provider type. Every ``create_provider`` call returns a fresh instance so no
two reads share a configured provider.
"""
import threading
from typing import Any, Callable, Dict, List, Optional

from resource_binder.infrastructure.logging.logger import get_logger
from resource_binder.providers.base.provider import ResourceProvider

ProviderFactory = Callable[..., ResourceProvider]


class UnsupportedProviderError(Exception):
    """Exception raised when an unsupported provider type is requested."""
    pass


class ProviderRegistration:
    """Container for provider registration information."""

    def __init__(self, provider_type: str, provider_factory: ProviderFactory, description: str = ""):
        """
        Initialize provider registration.

        Args:
            provider_type: Type identifier for the provider (e.g., 'aws', 'azure')
            provider_factory: Factory building a new, unconfigured provider
            description: Human-readable description
        """
        self.provider_type = provider_type
        self.provider_factory = provider_factory
        self.description = description


class ProviderRegistry:
    """
    Registry for provider factories.

    Thread-safe singleton implementation. Registrations are written during
    start-up and only read afterwards.
    """

    _instance: Optional["ProviderRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        self._registrations: Dict[str, ProviderRegistration] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "ProviderRegistry":
        """Get singleton instance of provider registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def register_provider(self, provider_type: str, provider_factory: ProviderFactory, description: str = "") -> None:
        """
        Register a provider factory.

        Raises:
            ValueError: If provider_type is already registered
        """
        with self._registration_lock:
            if provider_type in self._registrations:
                raise ValueError(f"Provider type '{provider_type}' is already registered")
            self._registrations[provider_type] = ProviderRegistration(
                provider_type=provider_type,
                provider_factory=provider_factory,
                description=description,
            )
            self._logger.debug("Registered provider", provider_type=provider_type)

    def unregister_provider(self, provider_type: str) -> bool:
        with self._registration_lock:
            if provider_type in self._registrations:
                del self._registrations[provider_type]
                self._logger.debug("Unregistered provider", provider_type=provider_type)
                return True
            return False

    def is_provider_registered(self, provider_type: str) -> bool:
        return provider_type in self._registrations

    def get_registered_providers(self) -> List[str]:
        return list(self._registrations.keys())

    def create_provider(self, provider_type: str, **kwargs: Any) -> ResourceProvider:
        """
        Create a new, unconfigured provider instance.

        Raises:
            UnsupportedProviderError: If provider type is not registered
        """
        registration = self._registrations.get(provider_type)
        if registration is None:
            available_providers = ", ".join(self.get_registered_providers())
            raise UnsupportedProviderError(
                f"Provider type '{provider_type}' is not registered. "
                f"Available providers: {available_providers}"
            )
        return registration.provider_factory(**kwargs)

    def provider_factory(self, provider_type: str, **kwargs: Any) -> Callable[[], ResourceProvider]:
        """Return a zero-argument factory bound to one provider type."""
        if not self.is_provider_registered(provider_type):
            raise UnsupportedProviderError(f"Provider type '{provider_type}' is not registered")
        return lambda: self.create_provider(provider_type, **kwargs)

    def clear_registrations(self) -> None:
        """Clear all provider registrations. Used primarily for testing."""
        with self._registration_lock:
            self._registrations.clear()


def get_provider_registry() -> ProviderRegistry:
    """Get the process-wide provider registry with built-in providers registered."""
    registry = ProviderRegistry.get_instance()
    with ProviderRegistry._lock:
        if not registry.get_registered_providers():
            from resource_binder.providers.aws.registration import register_aws_provider
            from resource_binder.providers.azure.registration import register_azure_provider

            register_aws_provider(registry)
            register_azure_provider(registry)
    return registry
