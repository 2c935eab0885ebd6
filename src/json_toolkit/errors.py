from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_POINTER = "invalid_pointer"
    INVALID_TRAVERSAL = "invalid_traversal"
    INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
    KEY_NOT_FOUND = "key_not_found"


class JsonToolkitError(Exception):
    """Base exception for all pointer and accessor errors.

    ``kind`` identifies the failure from a closed set so callers can branch on
    it without ``isinstance`` chains.  ``pointer`` is the textual pointer being
    processed when known.
    """

    kind: ErrorKind

    def __init__(self, message: str, *, pointer: str | None = None) -> None:
        super().__init__(message)
        self.pointer = pointer


class InvalidPointerError(JsonToolkitError, ValueError):
    """Raised when pointer text is malformed (missing leading ``/``)."""

    kind = ErrorKind.INVALID_POINTER


class InvalidTraversalError(JsonToolkitError):
    """Raised when a write path crosses a scalar as if it were a container."""

    kind = ErrorKind.INVALID_TRAVERSAL


class IndexOutOfBoundsError(JsonToolkitError, IndexError):
    kind = ErrorKind.INDEX_OUT_OF_BOUNDS


class KeyNotFoundError(JsonToolkitError, KeyError):
    """Raised by strict inserts when an intermediate node is missing."""

    kind = ErrorKind.KEY_NOT_FOUND

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


__all__ = [
    "ErrorKind",
    "IndexOutOfBoundsError",
    "InvalidPointerError",
    "InvalidTraversalError",
    "JsonToolkitError",
    "KeyNotFoundError",
]
