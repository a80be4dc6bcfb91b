"""Schema types and their compact declarations."""

from .declaration import schema_from_dict, schema_to_dict
from .types import (
    BOOL,
    NUMBER,
    STRING,
    ListType,
    MapType,
    ObjectType,
    PrimitiveKind,
    PrimitiveType,
    SchemaType,
    SetType,
    TupleType,
)

__all__ = [
    "SchemaType",
    "PrimitiveKind",
    "PrimitiveType",
    "ListType",
    "SetType",
    "TupleType",
    "MapType",
    "ObjectType",
    "STRING",
    "NUMBER",
    "BOOL",
    "schema_from_dict",
    "schema_to_dict",
]
