"""Typed value model."""

from .native import typed_value_from_native
from .typed_value import (
    CollectionValue,
    KeyedValue,
    NullValue,
    PrimitiveValue,
    TypedValue,
    bool_value,
    list_value,
    map_value,
    null,
    number_value,
    object_value,
    set_value,
    string_value,
    tuple_value,
)

__all__ = [
    "TypedValue",
    "NullValue",
    "PrimitiveValue",
    "CollectionValue",
    "KeyedValue",
    "null",
    "string_value",
    "number_value",
    "bool_value",
    "list_value",
    "set_value",
    "tuple_value",
    "map_value",
    "object_value",
    "typed_value_from_native",
]
