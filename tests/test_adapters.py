"""Tests for json_toolkit.adapters."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any

import pytest

from json_toolkit import (
    IndexOutOfBoundsError,
    InvalidTraversalError,
    Pointer,
    PythonAdapter,
    ValueAccessor,
    ValueAdapter,
)


class TestPythonAdapter:
    @pytest.fixture
    def adapter(self):
        return PythonAdapter()

    @pytest.mark.parametrize("value", [{}, OrderedDict()])
    def test_objects(self, adapter, value):
        assert adapter.is_object(value)
        assert not adapter.is_array(value)
        assert not adapter.is_scalar(value)

    @pytest.mark.parametrize("value", [[], [1, 2]])
    def test_arrays(self, adapter, value):
        assert adapter.is_array(value)
        assert not adapter.is_object(value)

    @pytest.mark.parametrize("value", [None, True, 1, 1.5, "s", b"b", bytearray(b"x"), (1, 2)])
    def test_scalars(self, adapter, value):
        assert adapter.is_scalar(value)

    def test_array_ops_preserve_order(self, adapter):
        arr = adapter.new_array()
        adapter.append(arr, "a")
        adapter.append(arr, "b")
        adapter.append(arr, "c")
        assert adapter.pop_index(arr, 0) == "a"
        assert arr == ["b", "c"]

    def test_factories(self):
        adapter = PythonAdapter(object_factory=OrderedDict, array_factory=list)
        assert type(adapter.new_object()) is OrderedDict
        assert type(adapter.new_array()) is list


# ---------------------------------------------------------------------------
# A second representation: explicitly tagged nodes
# ---------------------------------------------------------------------------


@dataclass
class Node:
    kind: str
    items: Any = field(default=None)


class NodeAdapter(ValueAdapter):
    def is_object(self, value):
        return isinstance(value, Node) and value.kind == "object"

    def is_array(self, value):
        return isinstance(value, Node) and value.kind == "array"

    def has_key(self, obj, key):
        return key in obj.items

    def get_key(self, obj, key):
        return obj.items[key]

    def set_key(self, obj, key, value):
        obj.items[key] = value

    def pop_key(self, obj, key):
        return obj.items.pop(key)

    def length(self, arr):
        return len(arr.items)

    def get_index(self, arr, index):
        return arr.items[index]

    def set_index(self, arr, index, value):
        arr.items[index] = value

    def pop_index(self, arr, index):
        return arr.items.pop(index)

    def append(self, arr, value):
        arr.items.append(value)

    def new_object(self):
        return Node("object", {})

    def new_array(self):
        return Node("array", [])


def scalar(value):
    return Node("scalar", value)


class TestCustomAdapter:
    @pytest.fixture
    def accessor(self):
        return ValueAccessor(NodeAdapter())

    def test_get(self, accessor):
        tree = Node("object", {"a": Node("array", [scalar(1), scalar(2)])})
        assert accessor.get(tree, "/a/1") == scalar(2)
        assert accessor.get(tree, "/a/2") is None
        assert accessor.get(tree, "/a/1/x") is None

    def test_insert_vivifies_with_adapter_containers(self, accessor):
        tree = Node("object", {})
        accessor.insert(tree, Pointer.parse("/a/0/b"), scalar("x"))
        assert tree == Node("object", {"a": Node("array", [Node("object", {"b": scalar("x")})])})

    def test_insert_errors(self, accessor):
        tree = Node("object", {"a": scalar(1), "l": Node("array", [])})
        with pytest.raises(InvalidTraversalError, match="Node"):
            accessor.insert(tree, "/a/b", scalar(2))
        with pytest.raises(IndexOutOfBoundsError):
            accessor.insert(tree, "/l/1", scalar(2))

    def test_remove(self, accessor):
        tree = Node("array", [scalar(1), scalar(2), scalar(3)])
        assert accessor.remove(tree, "/1") == scalar(2)
        assert tree == Node("array", [scalar(1), scalar(3)])

    def test_insert_key(self, accessor):
        tree = Node("object", {"foo": scalar("bar")})
        assert accessor.insert_key(tree, "foo", scalar(42)) == scalar("bar")
