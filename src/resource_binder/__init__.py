"""Resource Binder - Root Package.

Reads the current state of a cloud resource and renders it as a generic,
JSON-compatible document. The resource's declared attribute schema drives the
conversion, and collection attributes left unset are normalized to empty
arrays so consumers can rely on their shape.

Key Components:
    - domain: Schema types, typed values, identities, credentials and errors
    - application: Value converter, null-collection normalizer, state reader
    - providers: Provider port, registry, and the AWS and Azure providers
    - config: Configuration schemas and loader
    - infrastructure: Structured logging

Usage:
    >>> from resource_binder import read_resource
    >>> read_resource("azurerm_resource_group", "/subscriptions/<sub>/resourceGroups/example")
"""

from ._package import PACKAGE_NAME, __version__
from .application.conversion import convert, normalize
from .application.reader import ResourceStateReader, read_resource
from .domain.base.exceptions import (
    ConfigurationError,
    ReadFailedError,
    ResourceBinderError,
    ResourceNotFoundError,
    ResourceReadError,
    StateExtractionError,
    UnsupportedResourceTypeError,
    UnsupportedValueShapeError,
)
from .domain.resource import AmbientCredentials, ClientCertificateCredentials

__package_name__ = PACKAGE_NAME

__all__ = [
    "__version__",
    "convert",
    "normalize",
    "ResourceStateReader",
    "read_resource",
    "AmbientCredentials",
    "ClientCertificateCredentials",
    "ResourceBinderError",
    "ResourceReadError",
    "ConfigurationError",
    "UnsupportedResourceTypeError",
    "ReadFailedError",
    "ResourceNotFoundError",
    "StateExtractionError",
    "UnsupportedValueShapeError",
]
