"""Value converter - typed value trees to generic JSON-compatible data.

The converter knows only the shape of a value, never why it has that shape.
Output is plain Python data: ``None``, ``str``, ``float``, ``bool``, ``list``
and ``dict``.
"""
import math
from typing import Any, Dict, List, Union

from resource_binder.domain.base.exceptions import UnsupportedValueShapeError
from resource_binder.domain.schema.types import PrimitiveKind
from resource_binder.domain.value.typed_value import (
    CollectionValue,
    KeyedValue,
    NullValue,
    PrimitiveValue,
    TypedValue,
)

GenericValue = Union[None, str, float, bool, List[Any], Dict[str, Any]]
Document = Dict[str, GenericValue]


def convert(value: TypedValue) -> GenericValue:
    """Convert a typed value into its generic representation.

    Numbers become the nearest double, so integers beyond 2**53 lose
    precision. Collection order is kept as stored, including for sets.

    Raises:
        UnsupportedValueShapeError: If the value is not a known variant, or a
            number lies outside the double range
    """
    if isinstance(value, NullValue):
        return None

    if isinstance(value, PrimitiveValue):
        return _convert_primitive(value)

    if isinstance(value, CollectionValue):
        return [convert(item) for item in value.items]

    if isinstance(value, KeyedValue):
        return {key: convert(item) for key, item in value.entries.items()}

    raise UnsupportedValueShapeError(f"Unsupported value shape: {type(value).__name__}")


def _convert_primitive(value: PrimitiveValue) -> GenericValue:
    kind = value.kind
    if kind == PrimitiveKind.STRING:
        return value.value
    if kind == PrimitiveKind.NUMBER:
        return _convert_number(value.value)
    if kind == PrimitiveKind.BOOL:
        return bool(value.value)
    raise UnsupportedValueShapeError(f"Unsupported primitive kind: {kind}")


def _convert_number(number: Any) -> float:
    # Values outside the double range have no JSON representation
    try:
        result = float(number)
    except (OverflowError, ValueError) as e:
        raise UnsupportedValueShapeError(f"Number {number!r} is not representable as a double") from e
    if not math.isfinite(result):
        raise UnsupportedValueShapeError(f"Number {number!r} is not representable as a double")
    return result
