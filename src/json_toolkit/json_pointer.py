"""RFC 6901 JSON Pointer parsing and encoding.

Unrecognized escape sequences (``~`` followed by anything other than ``0`` or
``1``) are passed through literally when decoding.  Encoding always escapes
every ``~``, so such pointers re-serialize in their fully escaped form::

    >>> str(Pointer.parse("/a~2"))
    '/a~02'
"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import InvalidPointerError

APPEND_TOKEN = "-"


def escape_json_pointer_token(token: str) -> str:
    """Escape a single JSON Pointer token (RFC 6901)."""
    return token.replace("~", "~0").replace("/", "~1")


def unescape_json_pointer_token(token: str) -> str:
    """Unescape a single JSON Pointer token (RFC 6901)."""
    # ~1 before ~0, otherwise "~01" would decode to "/" instead of "~1".
    return token.replace("~1", "/").replace("~0", "~")


def parse_json_pointer(path: str) -> list[str]:
    """Split a JSON Pointer into unescaped tokens.

    The root pointer ``""`` returns an empty list.
    """
    if not isinstance(path, str):
        raise InvalidPointerError(f"JSON Pointer must be a string, got {type(path).__name__}")
    if path == "":
        return []
    if not path.startswith("/"):
        raise InvalidPointerError(
            f"JSON Pointer must start with '/' or be empty, got: {path!r}", pointer=path
        )
    return [unescape_json_pointer_token(tok) for tok in path[1:].split("/")]


def build_json_pointer(tokens: Iterable[str]) -> str:
    """Build a JSON Pointer string from raw tokens."""
    return "".join("/" + escape_json_pointer_token(token) for token in tokens)


def is_array_index(token: str) -> bool:
    """Return ``True`` if *token* can address an existing array element."""
    return token.isascii() and token.isdigit()


def looks_like_index(token: str) -> bool:
    """Return ``True`` if *token* is shaped like an array position (digits or ``-``)."""
    return token == APPEND_TOKEN or is_array_index(token)


def _token_text(token: str | int) -> str:
    if isinstance(token, str):
        return token
    # bool is an int subclass but never a meaningful token.
    if isinstance(token, int) and not isinstance(token, bool):
        return str(token)
    raise TypeError(f"JSON Pointer tokens must be str or int, got {type(token).__name__}")


@functools.total_ordering
@dataclass(frozen=True, slots=True, repr=False)
class Pointer:
    """An immutable, parsed JSON Pointer.

    ``Pointer("/a/b")`` parses pointer text; any other iterable is taken as
    decoded tokens, ``int`` tokens being converted with ``str``.  Equality and
    hashing are defined on the decoded tokens.  Pointers order by depth first
    and canonical text second, so parents sort before children.
    """

    tokens: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        tokens = self.tokens
        if isinstance(tokens, str):
            tokens = parse_json_pointer(tokens)
        object.__setattr__(self, "tokens", tuple(_token_text(token) for token in tokens))

    @classmethod
    def parse(cls, text: str) -> Pointer:
        return cls(tuple(parse_json_pointer(text)))

    @classmethod
    def from_tokens(cls, tokens: Iterable[str | int]) -> Pointer:
        return cls(tuple(tokens))

    @classmethod
    def root(cls) -> Pointer:
        return cls()

    @classmethod
    def coerce(cls, value: Pointer | str) -> Pointer:
        """Accept either a parsed pointer or its textual form."""
        if isinstance(value, Pointer):
            return value
        return cls.parse(value)

    def is_root(self) -> bool:
        return not self.tokens

    def as_str(self) -> str:
        return build_json_pointer(self.tokens)

    def depth(self) -> int:
        return len(self.tokens)

    def key(self) -> str | None:
        """The last decoded token, or ``None`` for the root pointer."""
        return self.tokens[-1] if self.tokens else None

    def parent(self) -> Pointer | None:
        if not self.tokens:
            return None
        return Pointer(self.tokens[:-1])

    def child(self, token: str | int) -> Pointer:
        return Pointer((*self.tokens, token))

    def ancestors(self) -> Iterator[Pointer]:
        """Yield this pointer, then each parent up to and including the root."""
        for end in range(len(self.tokens), -1, -1):
            yield Pointer(self.tokens[:end])

    def is_ancestor_of(self, other: Pointer) -> bool:
        """Return ``True`` if *other* is this pointer or lies beneath it."""
        return other.tokens[: len(self.tokens)] == self.tokens

    def is_parent_of(self, other: Pointer) -> bool:
        return other.parent() == self

    def is_sibling_of(self, other: Pointer) -> bool:
        return self != other and self.parent() == other.parent()

    def __truediv__(self, token: str | int) -> Pointer:
        return self.child(token)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"Pointer({self.as_str()!r})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented
        return (len(self.tokens), self.as_str()) < (len(other.tokens), other.as_str())

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(cls.parse, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_str]),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


__all__ = [
    "APPEND_TOKEN",
    "Pointer",
    "build_json_pointer",
    "escape_json_pointer_token",
    "is_array_index",
    "looks_like_index",
    "parse_json_pointer",
    "unescape_json_pointer_token",
]
