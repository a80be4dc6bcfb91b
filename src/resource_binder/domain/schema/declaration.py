"""Compact schema declarations.

Schemas may be written as plain data, which is handy for configuration files
and tests::

    "string"
    {"list": "string"}
    {"tuple": ["string", "number"]}
    {"object": {"name": "string", "tags": {"map": "string"}}}
"""
from typing import Any, Dict

from resource_binder.domain.base.exceptions import ValidationError
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

_ELEMENT_TYPES = {"list": ListType, "set": SetType, "map": MapType}


def schema_from_dict(declaration: Any) -> SchemaType:
    """Build a schema type from its compact declaration."""
    if isinstance(declaration, SchemaType):
        return declaration
    if isinstance(declaration, str):
        try:
            return PrimitiveType(kind=PrimitiveKind(declaration))
        except ValueError:
            raise ValidationError(f"Unknown primitive type '{declaration}'")
    if not isinstance(declaration, dict) or len(declaration) != 1:
        raise ValidationError(
            f"Schema declaration must be a primitive name or a single-key mapping, got {declaration!r}"
        )

    (kind, body), = declaration.items()
    if kind in _ELEMENT_TYPES:
        return _ELEMENT_TYPES[kind](element_type=schema_from_dict(body))
    if kind == "tuple":
        if not isinstance(body, (list, tuple)):
            raise ValidationError("Tuple declaration must list its element types")
        return TupleType(element_types=tuple(schema_from_dict(item) for item in body))
    if kind == "object":
        if not isinstance(body, dict):
            raise ValidationError("Object declaration must map attribute names to types")
        return ObjectType(attributes={name: schema_from_dict(item) for name, item in body.items()})
    raise ValidationError(f"Unknown schema kind '{kind}'")


def schema_to_dict(schema: SchemaType) -> Any:
    """Render a schema type as its compact declaration."""
    if isinstance(schema, PrimitiveType):
        return schema.kind.value
    if isinstance(schema, ListType):
        return {"list": schema_to_dict(schema.element_type)}
    if isinstance(schema, SetType):
        return {"set": schema_to_dict(schema.element_type)}
    if isinstance(schema, MapType):
        return {"map": schema_to_dict(schema.element_type)}
    if isinstance(schema, TupleType):
        return {"tuple": [schema_to_dict(item) for item in schema.element_types]}
    if isinstance(schema, ObjectType):
        attributes: Dict[str, Any] = {
            name: schema_to_dict(item) for name, item in schema.attributes.items()
        }
        return {"object": attributes}
    raise ValidationError(f"Unknown schema type {type(schema).__name__}")
