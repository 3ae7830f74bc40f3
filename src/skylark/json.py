"""Typed JSON value tree.

Thin wrappers over the dicts and lists produced by the standard ``json``
module. Provider parsers read fields through typed getters so a missing
field and an explicit ``null`` both come back as ``None`` (or the zero
value for numbers), while a value of the wrong JSON type raises
``JsonError`` instead of leaking a ``KeyError`` or ``TypeError``.

Usage::

    obj = parse_object('{"totalResults": 3, "rows": [["a", 1]]}')
    obj.get_int("totalResults")        # 3
    obj.get_array("rows").get_array(0).cast(str)  # ('a', '1')
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from skylark._internal.invariant import format_value
from skylark.errors import JsonError

T = TypeVar("T")


def parse_json(text: str | bytes) -> JsonObject | JsonArray:
    """Parse JSON text whose root is an object or an array."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        msg = f"Failed to parse JSON: {exc}"
        raise JsonError(msg) from exc
    return _wrap_root(data)


def parse_object(text: str | bytes) -> JsonObject:
    """Parse JSON text whose root must be an object."""
    root = parse_json(text)
    if not isinstance(root, JsonObject):
        msg = f"Expected JSON object, got {_json_type(root.raw)}"
        raise JsonError(msg)
    return root


def _wrap_root(data: Any) -> JsonObject | JsonArray:
    if isinstance(data, dict):
        return JsonObject(data)
    if isinstance(data, list):
        return JsonArray(data)
    msg = f"Expected JSON object or array, got {_json_type(data)}"
    raise JsonError(msg)


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class JsonObject:
    """A JSON object with typed, null-tolerant getters."""

    __slots__ = ("_data",)

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    @property
    def raw(self) -> dict[str, Any]:
        """The underlying dict."""
        return self._data

    def keys(self) -> list[str]:
        return list(self._data)

    def has_value(self, key: str) -> bool:
        """Return whether *key* is present and not ``null``."""
        return self._data.get(key) is not None

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"JsonObject({self._data!r})"

    def _typed(self, key: str, expected: type | tuple[type, ...], name: str) -> Any:
        value = self._data.get(key)
        if value is None:
            return None
        wrong_bool = isinstance(value, bool) and bool not in _as_tuple(expected)
        if wrong_bool or not isinstance(value, expected):
            msg = f"Expected {name} for {key!r}, got {_json_type(value)}"
            raise JsonError(msg)
        return value

    def get_object(
        self, key: str, parser: Callable[[JsonObject], T] | None = None
    ) -> JsonObject | T | None:
        """Return the object at *key*, optionally passed through *parser*.

        ``None`` if the key is missing or ``null``.
        """
        value = self._typed(key, dict, "object")
        if value is None:
            return None
        obj = JsonObject(value)
        return parser(obj) if parser is not None else obj

    def get_array(
        self, key: str, parser: Callable[[JsonObject], T] | None = None
    ) -> JsonArray | list[T] | None:
        """Return the array at *key*.

        With *parser*, each element (which must be an object) is parsed and
        a list is returned. ``None`` if the key is missing or ``null``.
        """
        value = self._typed(key, list, "array")
        if value is None:
            return None
        array = JsonArray(value)
        if parser is None:
            return array
        return [parser(array.get_object(i)) for i in range(len(array))]

    def get_string(self, key: str) -> str | None:
        return self._typed(key, str, "string")

    def get_int(self, key: str) -> int:
        """Return the integer at *key*, or ``0`` if missing or ``null``.

        Numeric strings (``"42"``) are accepted, matching how some APIs
        quote large counters.
        """
        value = self._data.get(key)
        if value is None:
            return 0
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError as exc:
                msg = f"Expected integer for {key!r}, got {value!r}"
                raise JsonError(msg) from exc
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = f"Expected integer for {key!r}, got {_json_type(value)}"
            raise JsonError(msg)
        if isinstance(value, float) and not value.is_integer():
            msg = f"Expected integer for {key!r}, got {value!r}"
            raise JsonError(msg)
        return int(value)

    def get_float(self, key: str) -> float:
        value = self._typed(key, (int, float), "number")
        return 0.0 if value is None else float(value)

    def get_bool(self, key: str) -> bool:
        value = self._typed(key, bool, "boolean")
        return bool(value)


class JsonArray:
    """A JSON array with typed element access."""

    __slots__ = ("_items",)

    def __init__(self, items: list[Any]) -> None:
        self._items = items

    @property
    def raw(self) -> list[Any]:
        """The underlying list."""
        return self._items

    @property
    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"JsonArray({self._items!r})"

    def get_array(self, index: int) -> JsonArray:
        value = self._items[index]
        if not isinstance(value, list):
            msg = f"Expected array at index {index}, got {_json_type(value)}"
            raise JsonError(msg)
        return JsonArray(value)

    def get_object(self, index: int) -> JsonObject:
        value = self._items[index]
        if not isinstance(value, dict):
            msg = f"Expected object at index {index}, got {_json_type(value)}"
            raise JsonError(msg)
        return JsonObject(value)

    def cast(self, target: type[str] = str) -> tuple[str | None, ...]:
        """Return every element as a string, keeping ``null`` as ``None``.

        Numbers and booleans are formatted the same way query values are.
        Nested arrays and objects are rendered back to compact JSON.
        """
        if target is not str:
            msg = f"Unsupported cast target: {target!r}"
            raise TypeError(msg)
        return tuple(_cell_to_str(item) for item in self._items)


def _cell_to_str(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return format_value(value)


def _as_tuple(expected: type | tuple[type, ...]) -> tuple[type, ...]:
    return expected if isinstance(expected, tuple) else (expected,)
