"""Translate CloudFormation registry schemas into object schema types.

Registry schemas are JSON Schema documents. The translation keeps what the
typed model can express:

- ``string``/``integer``/``number``/``boolean`` map to primitives
- ``array`` maps to a list, or a set when ``uniqueItems`` is set and
  ``insertionOrder`` is false
- ``object`` with ``properties`` maps to an object; ``patternProperties`` or
  a schema-valued ``additionalProperties`` maps to a map
- free-form objects, unions and recursive references fall back to string,
  holding the value as encoded JSON
"""
from typing import Any, Dict, FrozenSet, Optional

from resource_binder.domain.schema.types import (
    BOOL,
    NUMBER,
    STRING,
    ListType,
    MapType,
    ObjectType,
    SchemaType,
    SetType,
)
from resource_binder.providers.base.resource_data import ID_ATTRIBUTE

_DEFINITION_PREFIX = "#/definitions/"

_PRIMITIVES = {
    "string": STRING,
    "integer": NUMBER,
    "number": NUMBER,
    "boolean": BOOL,
}


def object_type_from_resource_schema(document: Dict[str, Any]) -> ObjectType:
    """Build the implied object type of a registry resource schema."""
    definitions = document.get("definitions") or {}
    attributes: Dict[str, SchemaType] = {ID_ATTRIBUTE: STRING}
    for name, prop in (document.get("properties") or {}).items():
        attributes[name] = _property_type(prop, definitions, frozenset())
    return ObjectType(attributes=attributes)


def _property_type(prop: Dict[str, Any], definitions: Dict[str, Any], seen: FrozenSet[str]) -> SchemaType:
    ref = prop.get("$ref")
    if ref:
        return _resolve_ref(ref, definitions, seen)

    json_type = _json_type(prop)
    if json_type in _PRIMITIVES:
        return _PRIMITIVES[json_type]

    if json_type == "array":
        element_type = _property_type(prop.get("items") or {}, definitions, seen)
        if prop.get("uniqueItems") and prop.get("insertionOrder") is False:
            return SetType(element_type=element_type)
        return ListType(element_type=element_type)

    if json_type == "object":
        if prop.get("properties"):
            return ObjectType(
                attributes={
                    name: _property_type(item, definitions, seen)
                    for name, item in prop["properties"].items()
                }
            )
        value_schema = _map_value_schema(prop)
        if value_schema is not None:
            return MapType(element_type=_property_type(value_schema, definitions, seen))

    return STRING


def _resolve_ref(ref: str, definitions: Dict[str, Any], seen: FrozenSet[str]) -> SchemaType:
    if not ref.startswith(_DEFINITION_PREFIX):
        return STRING
    name = ref[len(_DEFINITION_PREFIX):]
    if name in seen or name not in definitions:
        return STRING
    return _property_type(definitions[name], definitions, seen | {name})


def _json_type(prop: Dict[str, Any]) -> Optional[str]:
    json_type = prop.get("type")
    if isinstance(json_type, list):
        return json_type[0] if len(json_type) == 1 else None
    if json_type is None:
        if "properties" in prop or "patternProperties" in prop:
            return "object"
        if "items" in prop:
            return "array"
    return json_type


def _map_value_schema(prop: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    pattern_properties = prop.get("patternProperties")
    if pattern_properties:
        return next(iter(pattern_properties.values()))
    additional = prop.get("additionalProperties")
    if isinstance(additional, dict) and additional:
        return additional
    return None
