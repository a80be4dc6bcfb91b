"""Shape raw API payloads to fit a declared schema before they are stored."""
import json
from typing import Any

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


def shape_native(value: Any, schema_type: SchemaType) -> Any:
    """
    Shape an API payload value for ``schema_type``.

    Structured values landing in string attributes are encoded as JSON and
    undeclared object keys are dropped. Everything else is returned as is.
    """
    if value is None:
        return None

    if isinstance(schema_type, PrimitiveType):
        if schema_type.kind == PrimitiveKind.STRING and isinstance(value, (dict, list)):
            return json.dumps(value, sort_keys=True, separators=(",", ":"))
        return value

    if isinstance(schema_type, (ListType, SetType)) and isinstance(value, list):
        return [shape_native(item, schema_type.element_type) for item in value]

    if (
        isinstance(schema_type, TupleType)
        and isinstance(value, list)
        and len(value) == len(schema_type.element_types)
    ):
        return [shape_native(item, element_type) for item, element_type in zip(value, schema_type.element_types)]

    if isinstance(schema_type, MapType) and isinstance(value, dict):
        return {key: shape_native(item, schema_type.element_type) for key, item in value.items()}

    if isinstance(schema_type, ObjectType) and isinstance(value, dict):
        return {
            name: shape_native(value[name], attribute_type)
            for name, attribute_type in schema_type.attributes.items()
            if name in value
        }

    return value
