"""Credential descriptors consumed when configuring a provider.

A descriptor is used for exactly one read and is never cached between reads.
"""
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AmbientCredentials(BaseModel):
    """Use whatever session the environment already has (CLI login, instance role)."""
    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return "AmbientCredentials()"


class ClientCertificateCredentials(BaseModel):
    """Service principal authenticating with a client certificate."""
    model_config = ConfigDict(frozen=True)

    client_id: str
    client_certificate_data: bytes = Field(repr=False)
    tenant_id: str
    certificate_password: Optional[str] = Field(default=None, repr=False)

    @field_validator("client_id", "tenant_id")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("client_certificate_data")
    @classmethod
    def validate_certificate(cls, v: bytes) -> bytes:
        if not v:
            raise ValueError("client certificate data must not be empty")
        return v

    @classmethod
    def from_file(
        cls,
        client_id: str,
        certificate_path: str,
        tenant_id: str,
        certificate_password: Optional[str] = None,
    ) -> "ClientCertificateCredentials":
        """Load the certificate (PEM or PKCS12) from disk."""
        return cls(
            client_id=client_id,
            client_certificate_data=Path(certificate_path).read_bytes(),
            tenant_id=tenant_id,
            certificate_password=certificate_password,
        )


CredentialDescriptor = Union[AmbientCredentials, ClientCertificateCredentials]
