"""Mutable query string builder.

Implements the ``QueryStringLike`` protocol. Entries are kept in insertion
order as ``(key, value)`` pairs and the same key may appear more than once:

- ``add`` appends another entry, even for a key that already exists.
- ``set`` collapses every entry for the key into a single one.
- ``get_string`` and the typed getters read the first value for a key.
- ``get_list`` returns all values for a key.

Values are stored as strings, formatted without regard to the host locale.
Entries adopted from an existing source may hold ``None``; those serialize
as ``key=`` rather than being dropped.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, TypeAlias, TypeVar
from urllib.parse import parse_qsl, quote_plus

from skylark._internal.invariant import (
    format_value,
    parse_bool,
    parse_float,
    parse_int,
    to_single,
)
from skylark._internal.multimap import QueryStringLike
from skylark._internal.optional import get_httpx
from skylark.errors import ConversionError, InvalidKeyError

T = TypeVar("T")

QuerySource: TypeAlias = (
    QueryStringLike
    | str
    | Mapping[str, Any]
    | Iterable[tuple[str, Any]]
)


def _check_key(key: object) -> str:
    if not isinstance(key, str) or not key.strip():
        raise InvalidKeyError(key)
    return key


def _stored(value: Any) -> str | None:
    return None if value is None else format_value(value)


def _entries_for(key: object, value: Any) -> list[tuple[str, str | None]]:
    """Validate *key* and expand a list or tuple value into one entry per item."""
    key = _check_key(key)
    if isinstance(value, (list, tuple)):
        return [(key, _stored(v)) for v in value]
    return [(key, _stored(value))]


def _entries_from(source: Any) -> list[tuple[str, str | None]]:
    """Flatten any supported source into a list of entries.

    Every key is validated before anything is stored.
    """
    if isinstance(source, QueryStringLike):
        return source.items()
    if isinstance(source, str):
        pairs = parse_qsl(source.removeprefix("?"), keep_blank_values=True)
    elif hasattr(source, "multi_items"):
        # httpx.QueryParams and friends
        pairs = source.multi_items()
    elif isinstance(source, Mapping):
        pairs = source.items()
    else:
        pairs = source
    entries: list[tuple[str, str | None]] = []
    for key, value in pairs:
        entries.extend(_entries_for(key, value))
    return entries



class QueryString:
    """An ordered, mutable collection of query string parameters.

    Usage::

        query = QueryString()
        query.add("ids", "ga:12345")
        query.set("max-results", 50)
        str(query)  # 'ids=ga%3A12345&max-results=50'
    """

    __slots__ = ("_entries",)

    def __init__(self, source: QuerySource | None = None) -> None:
        self._entries: list[tuple[str, str | None]] = (
            [] if source is None else _entries_from(source)
        )

    @classmethod
    def from_source(cls, source: QuerySource | None) -> QueryString | None:
        """Convert *source* into a query string, passing ``None`` through."""
        if source is None:
            return None
        return cls(source)

    # -- Read-only projections -------------------------------------------------

    @property
    def count(self) -> int:
        """Number of entries, counting each duplicate key separately."""
        return len(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    @property
    def supports_duplicate_keys(self) -> bool:
        return True

    def keys(self) -> list[str]:
        """All keys in stored order, duplicates included."""
        return [key for key, _ in self._entries]

    def items(self) -> list[tuple[str, str | None]]:
        """All ``(key, value)`` entries in stored order."""
        return list(self._entries)

    # -- Mutation --------------------------------------------------------------

    def add(self, key: str, value: object) -> None:
        """Append an entry, keeping any existing entries for *key*."""
        key = _check_key(key)
        self._entries.append((key, format_value(value)))

    def set(self, key: str, value: object) -> None:
        """Replace every entry for *key* with a single entry.

        The entry keeps the position of the first existing one, or is
        appended when *key* is new.
        """
        key = _check_key(key)
        entry = (key, format_value(value))
        replaced: list[tuple[str, str | None]] = []
        placed = False
        for existing in self._entries:
            if existing[0] != key:
                replaced.append(existing)
            elif not placed:
                replaced.append(entry)
                placed = True
        if not placed:
            replaced.append(entry)
        self._entries = replaced

    def remove(self, key: str) -> bool:
        """Drop every entry for *key*. Returns whether anything was removed."""
        key = _check_key(key)
        kept = [entry for entry in self._entries if entry[0] != key]
        removed = len(kept) != len(self._entries)
        self._entries = kept
        return removed

    # -- Lookup ----------------------------------------------------------------

    def contains_key(self, key: str) -> bool:
        """Return whether an entry exists for *key*, even one holding ``None``."""
        key = _check_key(key)
        return any(existing == key for existing, _ in self._entries)

    def get_string(self, key: str) -> str | None:
        """Return the first value for *key*, or ``None`` if missing."""
        key = _check_key(key)
        for existing, value in self._entries:
            if existing == key:
                return value
        return None

    def get_list(self, key: str) -> list[str | None]:
        """Return all values for *key*."""
        key = _check_key(key)
        return [value for existing, value in self._entries if existing == key]

    def get_int32(self, key: str) -> int:
        """Return the value as a 32-bit integer, or ``0`` if missing or blank."""
        return self._get_value(key, lambda text: parse_int(text, 32), 0, "32-bit integer")

    def get_int64(self, key: str) -> int:
        """Return the value as a 64-bit integer, or ``0`` if missing or blank."""
        return self._get_value(key, lambda text: parse_int(text, 64), 0, "64-bit integer")

    def get_boolean(self, key: str) -> bool:
        """Return the value as a boolean, or ``False`` if missing or blank."""
        return self._get_value(key, parse_bool, False, "boolean")

    def get_double(self, key: str) -> float:
        """Return the value as a float, or ``0.0`` if missing or blank."""
        return self._get_value(key, parse_float, 0.0, "double")

    def get_float(self, key: str) -> float:
        """Return the value rounded to single precision, or ``0.0`` if missing or blank."""
        return self._get_value(key, lambda text: to_single(parse_float(text)), 0.0, "float")

    def _get_value(self, key: str, parse: Callable[[str], T], default: T, target: str) -> T:
        value = self.get_string(key)
        if value is None or not value.strip():
            return default
        try:
            return parse(value)
        except ValueError as exc:
            raise ConversionError(key, value, target) from exc

    # -- Serialization ---------------------------------------------------------

    def to_string(self) -> str:
        """Return the URL-encoded query string, without a leading ``?``."""
        return "&".join(
            f"{quote_plus(key)}={quote_plus(value or '')}" for key, value in self._entries
        )

    def to_httpx(self) -> Any:
        """Return the entries as an ``httpx.QueryParams``.

        Requires ``httpx`` (``pip install skylark[http]``).
        """
        httpx = get_httpx()
        return httpx.QueryParams([(key, value or "") for key, value in self._entries])

    def copy(self) -> QueryString:
        return QueryString(self)

    # -- Dunder ----------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key.strip():
            return False
        return self.contains_key(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryString):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._entries)
        return f"QueryString({{{items}}})"
