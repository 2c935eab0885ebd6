"""Pointer-addressed get / insert / remove over any JSON value representation.

Reads treat structural absence as "no value": a missing key, an out-of-range
index, or a path that runs through a scalar resolve to the caller's default.
Writes raise typed errors from :mod:`json_toolkit.errors` when the path is
unusable.

Insert auto-vivifies missing intermediate containers.  The container type is
chosen by peeking at the following token:

* digits or ``-`` create an array
* anything else creates an object

Missing structure is assembled detached from the document and attached in a
single step once every remaining token has been checked, so a failed insert
never leaves partially created parents behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .adapters import PythonAdapter, ValueAdapter
from .errors import (
    IndexOutOfBoundsError,
    InvalidPointerError,
    InvalidTraversalError,
    KeyNotFoundError,
)
from .json_pointer import APPEND_TOKEN, Pointer, build_json_pointer, is_array_index, looks_like_index

logger = logging.getLogger(__name__)

_MISSING: Any = object()


@dataclass(slots=True)
class AccessOptions:
    """Behaviour switches for :class:`ValueAccessor`.

    Attributes
    ----------
    create_missing : bool
        Whether ``insert`` creates missing intermediate containers.  When
        ``False`` a missing parent raises :class:`KeyNotFoundError`.
    max_depth : int | None
        Maximum number of pointer tokens accepted by any operation.  ``None``
        disables the limit.
    """

    create_missing: bool = True
    max_depth: int | None = None


@dataclass(frozen=True, slots=True)
class Mutation:
    """Outcome of an insert.

    ``root`` is the document root after the call; it only differs from the
    input when the root pointer was targeted.  ``previous`` is the value that
    was replaced, or ``None`` when the slot was newly created.
    """

    root: Any
    previous: Any = None


class ValueAccessor:
    """Runs pointer traversal and mutation through a :class:`ValueAdapter`."""

    __slots__ = ("adapter", "options")

    def __init__(
        self, adapter: ValueAdapter | None = None, *, options: AccessOptions | None = None
    ) -> None:
        self.adapter = adapter or PythonAdapter()
        self.options = options or AccessOptions()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, value: Any, pointer: Pointer | str, default: Any = None) -> Any:
        """Return the value at *pointer*, or *default* if it does not resolve."""
        node = self._walk(value, self._tokens(pointer))
        return default if node is _MISSING else node

    def contains(self, value: Any, pointer: Pointer | str) -> bool:
        return self._walk(value, self._tokens(pointer)) is not _MISSING

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def insert(self, value: Any, pointer: Pointer | str, new_value: Any) -> Mutation:
        """Set *new_value* at *pointer*, creating missing parents.

        Raises
        ------
        InvalidTraversalError
            If the path crosses a scalar, or addresses an array with a
            non-index token.
        IndexOutOfBoundsError
            If an array index is beyond the array's length.
        KeyNotFoundError
            If a parent is missing and ``create_missing`` is disabled.
        """
        tokens = self._tokens(pointer)
        if not tokens:
            logger.debug("Replacing document root")
            return Mutation(root=new_value, previous=value)

        current = value
        for i, token in enumerate(tokens[:-1]):
            child = self._child_for_write(current, token, tokens, i)
            if child is _MISSING:
                if not self.options.create_missing:
                    raise KeyNotFoundError(
                        f"Key {token!r} not found at {build_json_pointer(tokens[:i])!r}",
                        pointer=build_json_pointer(tokens),
                    )
                subtree = self._vivify(tokens, i + 1, new_value)
                logger.debug(
                    "Creating missing parents below %r for %r",
                    build_json_pointer(tokens[:i]),
                    build_json_pointer(tokens),
                )
                self._set_child(current, token, subtree, tokens, i)
                return Mutation(root=value, previous=None)
            current = child

        previous = self._set_child(current, tokens[-1], new_value, tokens, len(tokens) - 1)
        return Mutation(root=value, previous=previous)

    def insert_key(self, obj: Any, key: str, new_value: Any) -> Any:
        """Set *key* on the object *obj* directly; return the replaced value or ``None``."""
        if not self.adapter.is_object(obj):
            raise InvalidTraversalError(f"Cannot insert key {key!r} into {type(obj).__name__}")
        adapter = self.adapter
        previous = adapter.get_key(obj, key) if adapter.has_key(obj, key) else None
        adapter.set_key(obj, key, new_value)
        return previous

    def remove(self, value: Any, pointer: Pointer | str) -> Any:
        """Remove and return the value at *pointer*, or ``None`` if nothing is there.

        Array elements are removed in place, shifting the following elements
        down.  The root itself cannot be removed.
        """
        tokens = self._tokens(pointer)
        if not tokens:
            raise InvalidTraversalError("Cannot remove the document root (empty path)", pointer="")

        parent = self._walk(value, tokens[:-1])
        if parent is _MISSING:
            return None

        adapter = self.adapter
        last = tokens[-1]
        if adapter.is_object(parent):
            return adapter.pop_key(parent, last) if adapter.has_key(parent, last) else None
        if adapter.is_array(parent) and is_array_index(last):
            idx = int(last)
            if idx < adapter.length(parent):
                return adapter.pop_index(parent, idx)
        return None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _tokens(self, pointer: Pointer | str) -> tuple[str, ...]:
        tokens = Pointer.coerce(pointer).tokens
        max_depth = self.options.max_depth
        if max_depth is not None and len(tokens) > max_depth:
            raise InvalidPointerError(
                f"Path depth {len(tokens)} exceeds max_depth={max_depth}",
                pointer=build_json_pointer(tokens),
            )
        return tokens

    def _walk(self, value: Any, tokens: tuple[str, ...]) -> Any:
        adapter = self.adapter
        current = value
        for token in tokens:
            if adapter.is_object(current):
                if not adapter.has_key(current, token):
                    return _MISSING
                current = adapter.get_key(current, token)
            elif adapter.is_array(current):
                if not is_array_index(token):
                    return _MISSING
                idx = int(token)
                if idx >= adapter.length(current):
                    return _MISSING
                current = adapter.get_index(current, idx)
            else:
                return _MISSING
        return current

    def _child_for_write(self, current: Any, token: str, tokens: tuple[str, ...], pos: int) -> Any:
        """Return the existing child of *current* at *token*, or ``_MISSING`` if it may be created."""
        adapter = self.adapter
        if adapter.is_object(current):
            return adapter.get_key(current, token) if adapter.has_key(current, token) else _MISSING
        if adapter.is_array(current):
            if token == APPEND_TOKEN:
                return _MISSING
            idx = self._array_index(current, token, tokens, pos)
            if idx < adapter.length(current):
                return adapter.get_index(current, idx)
            return _MISSING
        raise self._scalar_error(current, token, tokens, pos)

    def _set_child(
        self, current: Any, token: str, new_value: Any, tokens: tuple[str, ...], pos: int
    ) -> Any:
        adapter = self.adapter
        if adapter.is_object(current):
            previous = adapter.get_key(current, token) if adapter.has_key(current, token) else None
            adapter.set_key(current, token, new_value)
            return previous
        if adapter.is_array(current):
            if token == APPEND_TOKEN:
                adapter.append(current, new_value)
                return None
            idx = self._array_index(current, token, tokens, pos)
            if idx == adapter.length(current):
                adapter.append(current, new_value)
                return None
            previous = adapter.get_index(current, idx)
            adapter.set_index(current, idx, new_value)
            return previous
        raise self._scalar_error(current, token, tokens, pos)

    def _array_index(self, arr: Any, token: str, tokens: tuple[str, ...], pos: int) -> int:
        """Parse *token* as a write position in *arr*; ``len(arr)`` is allowed."""
        if not is_array_index(token):
            raise InvalidTraversalError(
                f"Invalid array index {token!r} at {build_json_pointer(tokens[:pos])!r}",
                pointer=build_json_pointer(tokens),
            )
        idx = int(token)
        length = self.adapter.length(arr)
        if idx > length:
            raise IndexOutOfBoundsError(
                f"Array index {idx} out of bounds (length {length}) "
                f"at {build_json_pointer(tokens[:pos])!r}",
                pointer=build_json_pointer(tokens),
            )
        return idx

    def _vivify(self, tokens: tuple[str, ...], start: int, new_value: Any) -> Any:
        """Build the detached container for ``tokens[start - 1]`` holding the rest of the path."""
        top = self._new_container(tokens[start])
        current = top
        for pos in range(start, len(tokens) - 1):
            child = self._new_container(tokens[pos + 1])
            self._set_child(current, tokens[pos], child, tokens, pos)
            current = child
        self._set_child(current, tokens[-1], new_value, tokens, len(tokens) - 1)
        return top

    def _new_container(self, next_token: str) -> Any:
        if looks_like_index(next_token):
            return self.adapter.new_array()
        return self.adapter.new_object()

    def _scalar_error(
        self, current: Any, token: str, tokens: tuple[str, ...], pos: int
    ) -> InvalidTraversalError:
        return InvalidTraversalError(
            f"Cannot traverse into {type(current).__name__} with token {token!r} "
            f"at {build_json_pointer(tokens[:pos])!r}",
            pointer=build_json_pointer(tokens),
        )


default_accessor = ValueAccessor()


def get(value: Any, pointer: Pointer | str, default: Any = None) -> Any:
    return default_accessor.get(value, pointer, default)


def contains(value: Any, pointer: Pointer | str) -> bool:
    return default_accessor.contains(value, pointer)


def insert(value: Any, pointer: Pointer | str, new_value: Any) -> Mutation:
    return default_accessor.insert(value, pointer, new_value)


def insert_key(obj: Any, key: str, new_value: Any) -> Any:
    return default_accessor.insert_key(obj, key, new_value)


def remove(value: Any, pointer: Pointer | str) -> Any:
    return default_accessor.remove(value, pointer)


__all__ = [
    "AccessOptions",
    "Mutation",
    "ValueAccessor",
    "contains",
    "default_accessor",
    "get",
    "insert",
    "insert_key",
    "remove",
]
