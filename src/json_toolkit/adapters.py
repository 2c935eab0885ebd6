"""Capability set the accessor is written against.

A :class:`ValueAdapter` answers "is this an object, an array or a scalar" for
one concrete JSON value representation, and knows how to read and write
children of its containers.  The traversal algorithms in
:mod:`json_toolkit.accessor` only ever talk to an adapter, so supporting a new
representation means writing one adapter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, MutableMapping, MutableSequence
from typing import Any


class ValueAdapter(ABC):
    """Abstract object/array/scalar introspection and mutation."""

    @abstractmethod
    def is_object(self, value: Any) -> bool: ...

    @abstractmethod
    def is_array(self, value: Any) -> bool: ...

    def is_scalar(self, value: Any) -> bool:
        return not (self.is_object(value) or self.is_array(value))

    # -- objects ---------------------------------------------------------

    @abstractmethod
    def has_key(self, obj: Any, key: str) -> bool: ...

    @abstractmethod
    def get_key(self, obj: Any, key: str) -> Any: ...

    @abstractmethod
    def set_key(self, obj: Any, key: str, value: Any) -> None: ...

    @abstractmethod
    def pop_key(self, obj: Any, key: str) -> Any: ...

    # -- arrays ----------------------------------------------------------

    @abstractmethod
    def length(self, arr: Any) -> int: ...

    @abstractmethod
    def get_index(self, arr: Any, index: int) -> Any: ...

    @abstractmethod
    def set_index(self, arr: Any, index: int, value: Any) -> None: ...

    @abstractmethod
    def pop_index(self, arr: Any, index: int) -> Any:
        """Remove and return the element at *index*, preserving order."""

    @abstractmethod
    def append(self, arr: Any, value: Any) -> None: ...

    # -- construction ----------------------------------------------------

    @abstractmethod
    def new_object(self) -> Any: ...

    @abstractmethod
    def new_array(self) -> Any: ...


class PythonAdapter(ValueAdapter):
    """Adapter for trees of builtin-compatible containers.

    Any ``MutableMapping`` is an object and any ``MutableSequence`` is an
    array, which covers the output of ``json.loads``, ``yaml.safe_load``,
    ``msgspec`` and pydantic's ``model_dump(mode="json")``.  Only mutable
    sequences are arrays: ``tuple`` values (kept as-is by a python-mode
    ``model_dump()``), ``str`` and ``bytes`` are scalars, so pointers never
    resolve into them.  Containers created during auto-vivification come from
    *object_factory* and *array_factory*.
    """

    __slots__ = ("object_factory", "array_factory")

    def __init__(
        self,
        *,
        object_factory: Callable[[], MutableMapping[str, Any]] = dict,
        array_factory: Callable[[], MutableSequence[Any]] = list,
    ) -> None:
        self.object_factory = object_factory
        self.array_factory = array_factory

    def is_object(self, value: Any) -> bool:
        return isinstance(value, MutableMapping)

    def is_array(self, value: Any) -> bool:
        return isinstance(value, MutableSequence) and not isinstance(value, (str, bytes, bytearray))

    def has_key(self, obj: MutableMapping[str, Any], key: str) -> bool:
        return key in obj

    def get_key(self, obj: MutableMapping[str, Any], key: str) -> Any:
        return obj[key]

    def set_key(self, obj: MutableMapping[str, Any], key: str, value: Any) -> None:
        obj[key] = value

    def pop_key(self, obj: MutableMapping[str, Any], key: str) -> Any:
        return obj.pop(key)

    def length(self, arr: MutableSequence[Any]) -> int:
        return len(arr)

    def get_index(self, arr: MutableSequence[Any], index: int) -> Any:
        return arr[index]

    def set_index(self, arr: MutableSequence[Any], index: int, value: Any) -> None:
        arr[index] = value

    def pop_index(self, arr: MutableSequence[Any], index: int) -> Any:
        return arr.pop(index)

    def append(self, arr: MutableSequence[Any], value: Any) -> None:
        arr.append(value)

    def new_object(self) -> MutableMapping[str, Any]:
        return self.object_factory()

    def new_array(self) -> MutableSequence[Any]:
        return self.array_factory()


__all__ = ["PythonAdapter", "ValueAdapter"]
