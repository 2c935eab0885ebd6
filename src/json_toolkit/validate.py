"""Pointer mutations followed by Pydantic validation.

Both helpers work on a deep copy: the input document is **never mutated**.
A :class:`~pydantic.BaseModel` document is first converted to a ``dict`` via
:meth:`~pydantic.BaseModel.model_dump` in JSON mode.
"""

from __future__ import annotations

import copy
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter

from .accessor import ValueAccessor, default_accessor
from .json_pointer import Pointer

T = TypeVar("T")


def _as_plain(doc: Any) -> Any:
    if isinstance(doc, BaseModel):
        return doc.model_dump(mode="json")
    return copy.deepcopy(doc)


def _adapter_for(target: type[T] | TypeAdapter[T]) -> TypeAdapter[T]:
    return target if isinstance(target, TypeAdapter) else TypeAdapter(target)


def insert_and_validate(
    doc: Any,
    pointer: Pointer | str,
    value: Any,
    target: type[T] | TypeAdapter[T],
    *,
    accessor: ValueAccessor | None = None,
) -> T:
    """Insert *value* at *pointer* then validate the result against *target*.

    Raises
    ------
    JsonToolkitError
        If the insert fails (see :meth:`ValueAccessor.insert`).
    pydantic.ValidationError
        If the updated document does not conform to *target*.
    """
    accessor = accessor or default_accessor
    mutation = accessor.insert(_as_plain(doc), pointer, value)
    return _adapter_for(target).validate_python(mutation.root)


def remove_and_validate(
    doc: Any,
    pointer: Pointer | str,
    target: type[T] | TypeAdapter[T],
    *,
    accessor: ValueAccessor | None = None,
) -> T:
    """Remove the value at *pointer* then validate the result against *target*."""
    accessor = accessor or default_accessor
    plain = _as_plain(doc)
    accessor.remove(plain, pointer)
    return _adapter_for(target).validate_python(plain)


__all__ = ["insert_and_validate", "remove_and_validate"]
