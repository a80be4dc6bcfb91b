"""Typed value conversion and normalization."""

from .converter import Document, GenericValue, convert
from .normalizer import normalize

__all__ = ["convert", "normalize", "Document", "GenericValue"]
