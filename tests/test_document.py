"""Tests for json_toolkit.document and json_toolkit.validate."""

from __future__ import annotations

import copy

import pytest
from pydantic import BaseModel, TypeAdapter, ValidationError

from json_toolkit import (
    AccessOptions,
    Document,
    InvalidTraversalError,
    KeyNotFoundError,
    Pointer,
    ValueAccessor,
    insert_and_validate,
    remove_and_validate,
)

# ---------------------------------------------------------------------------
# Test models
# ---------------------------------------------------------------------------


class Address(BaseModel):
    city: str
    zip: str | None = None


class User(BaseModel):
    name: str
    age: int
    address: Address | None = None
    tags: list[str] = []


# ===================================================================
# Document
# ===================================================================


class TestDocument:
    def test_readme_flow(self):
        doc = Document({"foo": "bar", "zoo": {"id": 1}})

        doc.insert(Pointer.parse("/zoo/new_field"), "new_value")
        assert doc.root == {"foo": "bar", "zoo": {"id": 1, "new_field": "new_value"}}

        assert doc.insert_key("foo", 42) == "bar"
        assert doc.root == {"foo": 42, "zoo": {"id": 1, "new_field": "new_value"}}

        assert doc.get("/zoo/id") == 1

    def test_root_insert_replaces_root(self):
        doc = Document({"foo": {"bar": "zoo"}})
        previous = doc.insert("", "test2")
        assert previous == {"foo": {"bar": "zoo"}}
        assert doc.root == "test2"

    def test_contains(self):
        doc = Document({"a": [None]})
        assert "/a/0" in doc
        assert "/a/1" not in doc
        assert doc.contains(Pointer.parse("/a"))

    def test_remove(self):
        doc = Document({"items": [1, 2, 3]})
        assert doc.remove("/items/1") == 2
        assert doc.root == {"items": [1, 3]}
        assert doc.get("/items/1") == 3

    def test_remove_root_raises(self):
        with pytest.raises(InvalidTraversalError):
            Document({}).remove("")

    def test_custom_accessor(self):
        accessor = ValueAccessor(options=AccessOptions(create_missing=False))
        doc = Document({}, accessor=accessor)
        with pytest.raises(KeyNotFoundError):
            doc.insert("/a/b", 1)

    def test_json_round_trip(self):
        doc = Document.from_json('{"a": [1, {"b": null}]}')
        assert doc.get("/a/1/b", default="absent") is None
        doc.insert("/a/-", True)
        assert doc.to_json(sort_keys=True) == '{"a": [1, {"b": null}, true]}'

    def test_equality(self):
        assert Document({"a": 1}) == Document({"a": 1})
        assert Document({"a": 1}) != Document({"a": 2})
        assert repr(Document([1])) == "Document([1])"


# ===================================================================
# insert_and_validate / remove_and_validate
# ===================================================================


class TestValidate:
    def test_insert_dict_input(self):
        doc = {"name": "Alice", "age": 28}
        user = insert_and_validate(doc, "/address/city", "NYC", User)
        assert user == User(name="Alice", age=28, address=Address(city="NYC"))

    def test_input_not_mutated(self):
        doc = {"name": "Alice", "age": 28, "tags": ["a"]}
        original = copy.deepcopy(doc)
        insert_and_validate(doc, "/tags/-", "b", User)
        assert doc == original

    def test_insert_model_input(self):
        user = User(name="Alice", age=28)
        updated = insert_and_validate(user, "/tags/0", "admin", User)
        assert updated.tags == ["admin"]
        assert user.tags == []

    def test_type_adapter_target(self):
        adapter = TypeAdapter(list[int])
        assert insert_and_validate([1, 2], "/-", "3", adapter) == [1, 2, 3]

    def test_root_insert(self):
        assert insert_and_validate({}, "", {"name": "Bob", "age": 3}, User).name == "Bob"

    def test_invalid_result_raises(self):
        with pytest.raises(ValidationError):
            insert_and_validate({"name": "Alice", "age": 28}, "/age", "old", User)

    def test_insert_error_propagates(self):
        with pytest.raises(InvalidTraversalError):
            insert_and_validate({"name": "Alice", "age": 28}, "/age/x", 1, User)

    def test_remove(self):
        doc = {"name": "Alice", "age": 28, "tags": ["a", "b"]}
        user = remove_and_validate(doc, "/tags/0", User)
        assert user.tags == ["b"]
        assert doc["tags"] == ["a", "b"]

    def test_remove_required_field_raises(self):
        with pytest.raises(ValidationError):
            remove_and_validate(User(name="Alice", age=28), "/name", User)
