"""Domain exceptions - classified failures raised while reading resource state."""
from typing import Any, Dict, Optional


class ResourceBinderError(Exception):
    """Base exception for all resource-binder errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured output."""
        result: Dict[str, Any] = {
            "error": self.__class__.__name__,
            "message": self.message,
        }
        if self.details is not None:
            result["details"] = self.details
        return result


class ValidationError(ResourceBinderError):
    """Raised when caller-supplied input is invalid."""
    pass


class TypeMismatchError(ResourceBinderError, ValueError):
    """Raised when a native value does not conform to its declared schema type."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(f"{path}: {message}" if path else message, details={"path": path} if path else None)
        self.path = path


class ResourceReadError(ResourceBinderError):
    """Base exception for a failed resource read.

    Carries the resource type, the resource id and the triggering cause so a
    failure can be diagnosed without re-running the read.
    """

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.resource_type = resource_type
        self.resource_id = resource_id
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.resource_type is not None:
            result["resource_type"] = self.resource_type
        if self.resource_id is not None:
            result["resource_id"] = self.resource_id
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result


class ConfigurationError(ResourceReadError):
    """Raised when provider or credential setup fails, times out or is cancelled."""
    pass


class ConfigurationTimeoutError(ConfigurationError):
    """Raised when provider configuration exceeds its time bound."""
    pass


class ConfigurationCancelledError(ConfigurationError):
    """Raised when the caller cancels provider configuration."""
    pass


class UnsupportedResourceTypeError(ResourceReadError):
    """Raised when the requested resource type has no registered handler."""
    pass


class ReadFailedError(ResourceReadError):
    """Raised when a handler's read operation fails."""
    pass


class ResourceNotFoundError(ReadFailedError):
    """Raised when the handler reports the resource no longer exists."""
    pass


class StateExtractionError(ResourceReadError):
    """Raised when handler state cannot be rendered as a typed value tree."""
    pass


class UnsupportedValueShapeError(ResourceReadError):
    """Raised when the value converter meets an unknown variant or an unrepresentable number."""
    pass
