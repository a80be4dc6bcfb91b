"""Typed values - concrete values paired with the schema type they conform to."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Tuple, Union

from resource_binder.domain.schema.types import (
    ListType,
    MapType,
    ObjectType,
    PrimitiveKind,
    PrimitiveType,
    SchemaType,
    SetType,
    TupleType,
)

Number = Union[int, float, Decimal]
Primitive = Union[str, Number, bool]


@dataclass(frozen=True)
class NullValue:
    """An absent value of any schema type."""

    type: SchemaType


@dataclass(frozen=True)
class PrimitiveValue:
    type: PrimitiveType
    value: Primitive

    @property
    def kind(self) -> PrimitiveKind:
        return self.type.kind


@dataclass(frozen=True)
class CollectionValue:
    """A list, set or tuple value. Items keep the order the source produced."""

    type: Union[ListType, SetType, TupleType]
    items: Tuple["TypedValue", ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class KeyedValue:
    """A map or object value. Entries keep their insertion order."""

    type: Union[MapType, ObjectType]
    entries: Dict[str, "TypedValue"] = field(default_factory=dict)

    def get(self, key: str) -> "TypedValue":
        return self.entries[key]


TypedValue = Union[NullValue, PrimitiveValue, CollectionValue, KeyedValue]


# Constructors used by handlers and tests.

def null(schema_type: SchemaType) -> NullValue:
    return NullValue(schema_type)


def string_value(value: str) -> PrimitiveValue:
    return PrimitiveValue(PrimitiveType(kind=PrimitiveKind.STRING), value)


def number_value(value: Number) -> PrimitiveValue:
    return PrimitiveValue(PrimitiveType(kind=PrimitiveKind.NUMBER), value)


def bool_value(value: bool) -> PrimitiveValue:
    return PrimitiveValue(PrimitiveType(kind=PrimitiveKind.BOOL), value)


def list_value(element_type: SchemaType, *items: TypedValue) -> CollectionValue:
    return CollectionValue(ListType(element_type=element_type), tuple(items))


def set_value(element_type: SchemaType, *items: TypedValue) -> CollectionValue:
    return CollectionValue(SetType(element_type=element_type), tuple(items))


def tuple_value(*items: TypedValue) -> CollectionValue:
    return CollectionValue(TupleType(element_types=tuple(item.type for item in items)), tuple(items))


def map_value(element_type: SchemaType, entries: Dict[str, TypedValue]) -> KeyedValue:
    return KeyedValue(MapType(element_type=element_type), dict(entries))


def object_value(entries: Dict[str, TypedValue]) -> KeyedValue:
    attributes = {name: item.type for name, item in entries.items()}
    return KeyedValue(ObjectType(attributes=attributes), dict(entries))
