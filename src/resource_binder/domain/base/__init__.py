"""Base domain layer - exceptions shared by every bounded context."""

from .exceptions import (
    ConfigurationCancelledError,
    ConfigurationError,
    ConfigurationTimeoutError,
    ReadFailedError,
    ResourceBinderError,
    ResourceNotFoundError,
    ResourceReadError,
    StateExtractionError,
    TypeMismatchError,
    UnsupportedResourceTypeError,
    UnsupportedValueShapeError,
    ValidationError,
)

__all__ = [
    "ResourceBinderError",
    "ValidationError",
    "TypeMismatchError",
    "ResourceReadError",
    "ConfigurationError",
    "ConfigurationTimeoutError",
    "ConfigurationCancelledError",
    "UnsupportedResourceTypeError",
    "ReadFailedError",
    "ResourceNotFoundError",
    "StateExtractionError",
    "UnsupportedValueShapeError",
]
