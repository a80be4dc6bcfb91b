"""Null-collection normalizer.

The typed model stores "never configured" and "configured as empty" the same
way, as null. Consumers expect collection attributes to always be arrays, so
null collections are rewritten to ``[]`` when a resource is read.
"""
from typing import Any, Dict, Optional

from resource_binder.domain.schema.types import (
    ListType,
    MapType,
    ObjectType,
    SchemaType,
    SetType,
    TupleType,
)


def normalize(doc: Dict[str, Any], schema: ObjectType, recursive: bool = False) -> Dict[str, Any]:
    """Replace null collection attributes of a converted document with ``[]``.

    Only the top level of the document is rewritten unless ``recursive`` is
    set. Keys the schema does not declare are passed through untouched.

    Args:
        doc: Converted resource document
        schema: Object schema the document was converted from
        recursive: Also rewrite null collections inside nested objects

    Returns:
        A new document; ``doc`` itself is not modified
    """
    result: Dict[str, Any] = {}
    for key, value in doc.items():
        declared = schema.attribute_type(key)
        if declared is None:
            result[key] = value
        elif value is None:
            result[key] = [] if declared.is_collection() else None
        elif recursive:
            result[key] = _normalize_nested(value, declared)
        else:
            result[key] = value
    return result


def _normalize_nested(value: Any, declared: Optional[SchemaType]) -> Any:
    if isinstance(declared, ObjectType) and isinstance(value, dict):
        return normalize(value, declared, recursive=True)
    if isinstance(declared, (ListType, SetType)) and isinstance(value, list):
        return [_normalize_nested(item, declared.element_type) for item in value]
    if isinstance(declared, MapType) and isinstance(value, dict):
        return {key: _normalize_nested(item, declared.element_type) for key, item in value.items()}
    if (
        isinstance(declared, TupleType)
        and isinstance(value, list)
        and len(value) == len(declared.element_types)
    ):
        return [
            _normalize_nested(item, element_type)
            for item, element_type in zip(value, declared.element_types)
        ]
    return value
