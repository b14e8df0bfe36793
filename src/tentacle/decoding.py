"""Typed decoding of parsed JSON values.

Models decode themselves from the generic value tree produced by orjson
through the extractors in this module. Every schema mismatch raises a
``DecodeError`` subclass naming the offending location, so callers can tell
a malformed payload apart from an unexpected one.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

_T = TypeVar("_T")

# JSON type names as they appear in error messages
_JSON_TYPE_NAMES: dict[type, str] = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


def json_type_name(value: Any) -> str:
    """Return the JSON type name of a parsed value."""
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def _join(path: str, key: str | int) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else key


class DecodeError(Exception):
    """Base exception for JSON values that do not match a schema."""

    def __init__(self, message: str, path: str = "") -> None:
        """Initialize the error.

        Args:
            message: Description of the mismatch.
            path: Dotted location of the value inside the document.

        """
        super().__init__(message)
        self.message = message
        self.path = path

    def _fields(self) -> tuple[Any, ...]:
        return (self.message, self.path)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.path:
            return f"{self.message} at '{self.path}'"
        return self.message


class TypeMismatch(DecodeError):
    """Raised when a value has a different JSON type than expected."""

    def __init__(self, expected: str, actual: str, path: str = "") -> None:
        super().__init__(f"expected {expected}, found {actual}", path)
        self.expected = expected
        self.actual = actual

    def _fields(self) -> tuple[Any, ...]:
        return (self.expected, self.actual, self.path)


class MissingKey(DecodeError):
    """Raised when a required object key is absent."""

    def __init__(self, key: str, path: str = "") -> None:
        super().__init__(f"missing key '{key}'", path)
        self.key = key

    def _fields(self) -> tuple[Any, ...]:
        return (self.key, self.path)


class Decodable(Protocol):
    """Anything that can be constructed from a parsed JSON value."""

    @classmethod
    def decode(cls, value: Any, path: str = "") -> Any:
        """Build an instance or raise ``DecodeError``."""
        ...


def expect_type(
    value: Any, kind: type[_T], expected: str, path: str = ""
) -> _T:
    """Return ``value`` if it is an instance of ``kind``.

    ``bool`` never satisfies ``int`` even though Python treats it as one.

    Raises:
        TypeMismatch: If the value has another type.

    """
    if isinstance(value, bool) and kind is not bool:
        raise TypeMismatch(expected, json_type_name(value), path)
    if not isinstance(value, kind):
        raise TypeMismatch(expected, json_type_name(value), path)
    return value


def expect_object(value: Any, path: str = "") -> dict[str, Any]:
    """Return ``value`` as a JSON object."""
    return expect_type(value, dict, "object", path)


def required(
    obj: dict[str, Any], key: str, kind: type[_T], path: str = ""
) -> _T:
    """Extract a required key of the given type from a JSON object.

    Raises:
        MissingKey: If the key is absent.
        TypeMismatch: If the value has another type (``null`` included).

    """
    if key not in obj:
        raise MissingKey(key, path)
    return expect_type(
        obj[key], kind, _JSON_TYPE_NAMES[kind], _join(path, key)
    )


def optional(
    obj: dict[str, Any], key: str, kind: type[_T], path: str = ""
) -> _T | None:
    """Extract an optional key; absent and ``null`` both yield None."""
    value = obj.get(key)
    if value is None:
        return None
    return expect_type(value, kind, _JSON_TYPE_NAMES[kind], _join(path, key))


def required_list(
    obj: dict[str, Any],
    key: str,
    decoder: type[Decodable],
    path: str = "",
) -> tuple[Any, ...]:
    """Decode every element of a required array with ``decoder``."""
    items = required(obj, key, list, path)
    list_path = _join(path, key)
    return tuple(
        decoder.decode(item, _join(list_path, index))
        for index, item in enumerate(items)
    )
