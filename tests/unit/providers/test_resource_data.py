"""Tests for the per-read state container and payload shaping."""
import pytest

from resource_binder.domain.base.exceptions import TypeMismatchError
from resource_binder.domain.schema import (
    NUMBER,
    STRING,
    ListType,
    MapType,
    ObjectType,
    TupleType,
)
from resource_binder.domain.value import KeyedValue, NullValue
from resource_binder.providers.base import ResourceData
from resource_binder.providers.base.shaping import shape_native

SCHEMA = ObjectType(
    attributes={
        "id": STRING,
        "name": STRING,
        "tags": ListType(element_type=STRING),
    }
)


@pytest.mark.unit
class TestResourceData:
    def test_id_starts_empty(self):
        assert ResourceData(SCHEMA).id == ""

    def test_set_id_through_attribute(self):
        data = ResourceData(SCHEMA)
        data.set("id", "w-1")
        assert data.id == "w-1"
        assert data.get("id") == "w-1"

    def test_clearing_id(self):
        data = ResourceData(SCHEMA)
        data.set_id("w-1")
        data.set_id(None)
        assert data.id == ""

    def test_undeclared_attribute_rejected(self):
        data = ResourceData(SCHEMA)
        with pytest.raises(KeyError):
            data.set("colour", "blue")

    def test_undeclared_attribute_ignored(self):
        data = ResourceData(SCHEMA, ignore_unknown_attributes=True)
        data.set("colour", "blue")
        assert "colour" not in data.state()

    def test_state_includes_declared_id(self):
        data = ResourceData(SCHEMA)
        data.set_id("w-1")
        data.set_many({"name": "foo", "tags": ["a"]})
        assert data.state() == {"name": "foo", "tags": ["a"], "id": "w-1"}

    def test_state_is_a_copy(self):
        data = ResourceData(SCHEMA)
        data.state()["name"] = "changed"
        assert data.get("name") is None

    def test_to_typed_value(self):
        data = ResourceData(SCHEMA)
        data.set_id("w-1")
        data.set("name", "foo")

        value = data.to_typed_value()

        assert isinstance(value, KeyedValue)
        assert value.get("id").value == "w-1"
        assert isinstance(value.get("tags"), NullValue)

    def test_to_typed_value_mismatch(self):
        data = ResourceData(SCHEMA)
        data.set("tags", {"not": "a list"})
        with pytest.raises(TypeMismatchError):
            data.to_typed_value()

    def test_repr_hides_values(self):
        data = ResourceData(SCHEMA)
        data.set("name", "secret-name")
        assert "secret-name" not in repr(data)


@pytest.mark.unit
class TestShapeNative:
    def test_structured_value_in_string_attribute_encoded(self):
        assert shape_native({"b": 1, "a": [True]}, STRING) == '{"a":[true],"b":1}'

    def test_primitives_unchanged(self):
        assert shape_native(5, NUMBER) == 5
        assert shape_native(None, STRING) is None

    def test_undeclared_object_keys_dropped(self):
        schema = ObjectType(attributes={"name": STRING})
        assert shape_native({"name": "a", "extra": 1}, schema) == {"name": "a"}

    def test_nested_collections(self):
        schema = MapType(element_type=ListType(element_type=STRING))
        assert shape_native({"k": [{"x": 1}, "y"]}, schema) == {"k": ['{"x":1}', "y"]}

    def test_tuple_length_mismatch_untouched(self):
        schema = TupleType(element_types=(STRING,))
        assert shape_native([{"x": 1}, "b"], schema) == [{"x": 1}, "b"]
