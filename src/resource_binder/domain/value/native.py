"""Build typed value trees from plain Python data against a schema type.

Only safe conversions are applied: numbers and bools render as strings, numeric
strings parse as numbers, and ``"true"``/``"false"`` parse as bools. Anything
else that does not fit the declared type raises ``TypeMismatchError``.
"""
import math
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List

from resource_binder.domain.base.exceptions import TypeMismatchError
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
from resource_binder.domain.value.typed_value import (
    CollectionValue,
    KeyedValue,
    NullValue,
    PrimitiveValue,
    TypedValue,
)

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def typed_value_from_native(
    raw: Any,
    schema_type: SchemaType,
    ignore_unknown_attributes: bool = False,
) -> TypedValue:
    """Convert native data into a typed value conforming to ``schema_type``.

    Args:
        raw: Plain Python data (None, str, int, float, Decimal, bool, list, dict)
        schema_type: Declared type the value must conform to
        ignore_unknown_attributes: Drop undeclared object keys instead of failing

    Raises:
        TypeMismatchError: If the data does not fit the declared type
    """
    return _build(raw, schema_type, "", ignore_unknown_attributes)


def _build(raw: Any, schema_type: SchemaType, path: str, ignore_unknown: bool) -> TypedValue:
    if raw is None:
        return NullValue(schema_type)

    if isinstance(schema_type, PrimitiveType):
        return PrimitiveValue(schema_type, _primitive(raw, schema_type.kind, path))

    if isinstance(schema_type, (ListType, SetType)):
        items = _sequence(raw, schema_type, path)
        return CollectionValue(
            schema_type,
            tuple(
                _build(item, schema_type.element_type, f"{path}[{index}]", ignore_unknown)
                for index, item in enumerate(items)
            ),
        )

    if isinstance(schema_type, TupleType):
        items = _sequence(raw, schema_type, path)
        if len(items) != len(schema_type.element_types):
            raise TypeMismatchError(
                f"tuple requires {len(schema_type.element_types)} elements, got {len(items)}", path
            )
        return CollectionValue(
            schema_type,
            tuple(
                _build(item, element_type, f"{path}[{index}]", ignore_unknown)
                for index, (item, element_type) in enumerate(zip(items, schema_type.element_types))
            ),
        )

    if isinstance(schema_type, MapType):
        mapping = _mapping(raw, schema_type, path)
        return KeyedValue(
            schema_type,
            {
                key: _build(item, schema_type.element_type, _join(path, key), ignore_unknown)
                for key, item in mapping.items()
            },
        )

    if isinstance(schema_type, ObjectType):
        mapping = _mapping(raw, schema_type, path)
        if not ignore_unknown:
            unknown = [key for key in mapping if not schema_type.has_attribute(key)]
            if unknown:
                raise TypeMismatchError(f"unsupported attribute '{unknown[0]}'", path)
        return KeyedValue(
            schema_type,
            {
                name: _build(mapping.get(name), attribute_type, _join(path, name), ignore_unknown)
                for name, attribute_type in schema_type.attributes.items()
            },
        )

    raise TypeMismatchError(f"unsupported schema type {type(schema_type).__name__}", path)


def _primitive(raw: Any, kind: PrimitiveKind, path: str) -> Any:
    if kind == PrimitiveKind.STRING:
        if isinstance(raw, str):
            return raw
        if isinstance(raw, bool):
            return "true" if raw else "false"
        if isinstance(raw, (int, float, Decimal)):
            return str(raw)
        raise TypeMismatchError(f"string required, got {type(raw).__name__}", path)

    if kind == PrimitiveKind.NUMBER:
        if isinstance(raw, bool):
            raise TypeMismatchError("number required, got bool", path)
        if isinstance(raw, int):
            return raw
        if isinstance(raw, str):
            try:
                raw = Decimal(raw)
            except InvalidOperation:
                raise TypeMismatchError(f"a number is required, got '{raw}'", path)
        if isinstance(raw, float):
            if not math.isfinite(raw):
                raise TypeMismatchError(f"number must be finite, got {raw!r}", path)
            return raw
        if isinstance(raw, Decimal):
            if not raw.is_finite():
                raise TypeMismatchError(f"number must be finite, got '{raw}'", path)
            return raw
        raise TypeMismatchError(f"number required, got {type(raw).__name__}", path)

    if kind == PrimitiveKind.BOOL:
        if isinstance(raw, bool):
            return raw
        if raw == "true":
            return True
        if raw == "false":
            return False
        raise TypeMismatchError(f"bool required, got {raw!r}", path)

    raise TypeMismatchError(f"unsupported primitive kind {kind}", path)


def _sequence(raw: Any, schema_type: SchemaType, path: str) -> List[Any]:
    if not isinstance(raw, _SEQUENCE_TYPES):
        raise TypeMismatchError(f"{schema_type.friendly_name()} required, got {type(raw).__name__}", path)
    return list(raw)


def _mapping(raw: Any, schema_type: SchemaType, path: str) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise TypeMismatchError(f"{schema_type.friendly_name()} required, got {type(raw).__name__}", path)
    for key in raw:
        if not isinstance(key, str):
            raise TypeMismatchError(f"keys must be strings, got {type(key).__name__}", path)
    return raw


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name
