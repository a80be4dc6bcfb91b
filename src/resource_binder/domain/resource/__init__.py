"""Resource identity and credential value objects."""

from .credentials import AmbientCredentials, ClientCertificateCredentials, CredentialDescriptor
from .identity import ResourceIdentity

__all__ = [
    "ResourceIdentity",
    "AmbientCredentials",
    "ClientCertificateCredentials",
    "CredentialDescriptor",
]
