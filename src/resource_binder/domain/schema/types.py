"""Schema types - the declared shapes a resource attribute may take."""
from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class PrimitiveKind(str, Enum):
    """Primitive kinds supported by the typed value model."""
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"


class SchemaType(BaseModel):
    """Base class for all schema types. Immutable once declared."""
    model_config = ConfigDict(frozen=True)

    def is_primitive(self) -> bool:
        return False

    def is_list(self) -> bool:
        return False

    def is_set(self) -> bool:
        return False

    def is_tuple(self) -> bool:
        return False

    def is_map(self) -> bool:
        return False

    def is_object(self) -> bool:
        return False

    def is_collection(self) -> bool:
        """List, set and tuple types all materialise as arrays."""
        return self.is_list() or self.is_set() or self.is_tuple()

    def is_keyed(self) -> bool:
        """Map and object types all materialise as documents."""
        return self.is_map() or self.is_object()

    def friendly_name(self) -> str:
        raise NotImplementedError


class PrimitiveType(SchemaType):
    """A string, number or bool."""

    kind: PrimitiveKind

    def is_primitive(self) -> bool:
        return True

    def friendly_name(self) -> str:
        return self.kind.value


class ListType(SchemaType):
    """An ordered sequence of values of one element type."""

    element_type: SchemaType

    def is_list(self) -> bool:
        return True

    def friendly_name(self) -> str:
        return f"list of {self.element_type.friendly_name()}"


class SetType(SchemaType):
    """An unordered collection of values of one element type."""

    element_type: SchemaType

    def is_set(self) -> bool:
        return True

    def friendly_name(self) -> str:
        return f"set of {self.element_type.friendly_name()}"


class TupleType(SchemaType):
    """A fixed-length sequence with one declared type per position."""

    element_types: Tuple[SchemaType, ...] = Field(default_factory=tuple)

    def is_tuple(self) -> bool:
        return True

    def friendly_name(self) -> str:
        return "tuple"


class MapType(SchemaType):
    """A string-keyed mapping with one value type."""

    element_type: SchemaType

    def is_map(self) -> bool:
        return True

    def friendly_name(self) -> str:
        return f"map of {self.element_type.friendly_name()}"


class ObjectType(SchemaType):
    """A fixed set of named attributes, each with its own type."""

    attributes: Dict[str, SchemaType] = Field(default_factory=dict)

    def is_object(self) -> bool:
        return True

    def attribute_type(self, name: str) -> Optional[SchemaType]:
        """Return the declared type of an attribute, or None when undeclared."""
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def friendly_name(self) -> str:
        return "object"


STRING = PrimitiveType(kind=PrimitiveKind.STRING)
NUMBER = PrimitiveType(kind=PrimitiveKind.NUMBER)
BOOL = PrimitiveType(kind=PrimitiveKind.BOOL)
