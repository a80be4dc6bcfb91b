"""Resource state reading."""

from .service import ResourceStateReader, read_resource

__all__ = ["ResourceStateReader", "read_resource"]
