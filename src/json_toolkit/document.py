from __future__ import annotations

import json
from typing import Any

from .accessor import ValueAccessor, default_accessor
from .json_pointer import Pointer


class Document:
    """A mutable handle on a JSON value tree.

    Holding the root lets an insert at the root pointer replace the whole
    document.  Pointers may be given as :class:`Pointer` instances or text.

    Example::

        doc = Document({"foo": "bar", "zoo": {"id": 1}})
        doc.insert("/zoo/new_field", "new_value")
        doc.insert_key("foo", 42)   # -> "bar"
        doc.get("/zoo/id")          # -> 1
    """

    __slots__ = ("root", "accessor")

    def __init__(self, root: Any = None, *, accessor: ValueAccessor | None = None) -> None:
        self.root = root
        self.accessor = accessor or default_accessor

    @classmethod
    def from_json(cls, text: str | bytes, *, accessor: ValueAccessor | None = None) -> Document:
        return cls(json.loads(text), accessor=accessor)

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.root, **kwargs)

    def get(self, pointer: Pointer | str, default: Any = None) -> Any:
        return self.accessor.get(self.root, pointer, default)

    def contains(self, pointer: Pointer | str) -> bool:
        return self.accessor.contains(self.root, pointer)

    def __contains__(self, pointer: Pointer | str) -> bool:
        return self.contains(pointer)

    def insert(self, pointer: Pointer | str, value: Any) -> Any:
        """Insert *value* at *pointer* and return the value it replaced, if any."""
        mutation = self.accessor.insert(self.root, pointer, value)
        self.root = mutation.root
        return mutation.previous

    def insert_key(self, key: str, value: Any) -> Any:
        return self.accessor.insert_key(self.root, key, value)

    def remove(self, pointer: Pointer | str) -> Any:
        return self.accessor.remove(self.root, pointer)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Document):
            return self.root == other.root
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Document({self.root!r})"


__all__ = ["Document"]
