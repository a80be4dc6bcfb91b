"""Per-read state container populated by resource handlers."""
from typing import Any, Dict

from resource_binder.domain.base.exceptions import TypeMismatchError
from resource_binder.domain.schema.types import ObjectType
from resource_binder.domain.value.native import typed_value_from_native
from resource_binder.domain.value.typed_value import KeyedValue

ID_ATTRIBUTE = "id"


class ResourceData:
    """
    Mutable state for a single resource read.

    A handler receives an instance whose id is already set, fills in the
    attributes it read from the remote system, and clears the id when the
    resource no longer exists. The container is discarded after the read.
    """

    def __init__(self, schema: ObjectType, ignore_unknown_attributes: bool = False):
        self._schema = schema
        self._ignore_unknown_attributes = ignore_unknown_attributes
        self._id = ""
        self._attributes: Dict[str, Any] = {}

    @property
    def schema(self) -> ObjectType:
        return self._schema

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, resource_id: str) -> None:
        """Set the resource id. An empty id marks the resource as gone."""
        self._id = resource_id or ""

    def get(self, name: str, default: Any = None) -> Any:
        if name == ID_ATTRIBUTE and self._schema.has_attribute(ID_ATTRIBUTE):
            return self._id or default
        return self._attributes.get(name, default)

    def set(self, name: str, value: Any) -> None:
        """
        Set an attribute value.

        Raises:
            KeyError: If the attribute is not declared by the schema
        """
        if not self._schema.has_attribute(name):
            if self._ignore_unknown_attributes:
                return
            raise KeyError(f"Invalid attribute '{name}': not declared by the resource schema")
        if name == ID_ATTRIBUTE:
            self.set_id(value)
            return
        self._attributes[name] = value

    def set_many(self, values: Dict[str, Any]) -> None:
        for name, value in values.items():
            self.set(name, value)

    def state(self) -> Dict[str, Any]:
        """Return a copy of the raw attribute state, id included when declared."""
        state = dict(self._attributes)
        if self._schema.has_attribute(ID_ATTRIBUTE):
            state[ID_ATTRIBUTE] = self._id or None
        return state

    def to_typed_value(self) -> KeyedValue:
        """
        Render the state as a typed object value scoped to the schema.

        Raises:
            TypeMismatchError: If an attribute does not fit its declared type
        """
        value = typed_value_from_native(
            self.state(), self._schema, ignore_unknown_attributes=self._ignore_unknown_attributes
        )
        if not isinstance(value, KeyedValue):
            raise TypeMismatchError("resource state did not produce an object value")
        return value

    def __repr__(self) -> str:
        return f"ResourceData(id={self._id!r}, attributes={sorted(self._attributes)!r})"
