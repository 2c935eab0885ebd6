from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("json-toolkit")
except PackageNotFoundError:  # pragma: no cover - local source tree without installed metadata
    __version__ = "0.1.0"

from .accessor import (
    AccessOptions,
    Mutation,
    ValueAccessor,
    contains,
    default_accessor,
    get,
    insert,
    insert_key,
    remove,
)
from .adapters import PythonAdapter, ValueAdapter
from .document import Document
from .errors import (
    ErrorKind,
    IndexOutOfBoundsError,
    InvalidPointerError,
    InvalidTraversalError,
    JsonToolkitError,
    KeyNotFoundError,
)
from .json_pointer import (
    Pointer,
    build_json_pointer,
    escape_json_pointer_token,
    parse_json_pointer,
    unescape_json_pointer_token,
)
from .validate import insert_and_validate, remove_and_validate

__all__ = [
    "AccessOptions",
    "Document",
    "ErrorKind",
    "IndexOutOfBoundsError",
    "InvalidPointerError",
    "InvalidTraversalError",
    "JsonToolkitError",
    "KeyNotFoundError",
    "Mutation",
    "Pointer",
    "PythonAdapter",
    "ValueAccessor",
    "ValueAdapter",
    "build_json_pointer",
    "contains",
    "default_accessor",
    "escape_json_pointer_token",
    "get",
    "insert",
    "insert_and_validate",
    "insert_key",
    "parse_json_pointer",
    "remove",
    "remove_and_validate",
    "unescape_json_pointer_token",
]
