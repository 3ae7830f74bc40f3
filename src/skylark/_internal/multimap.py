"""QueryStringLike protocol — shared interface for query string builders.

A structural protocol so request builders can accept any query string
implementation without coupling to the concrete type.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class QueryStringLike(Protocol):
    """A mutable, ordered string multimap that renders as a URL query string.

    ``get_string`` and the typed getters read the first value for a key.
    ``get_list`` returns all values for a key.
    """

    @property
    def count(self) -> int: ...
    @property
    def is_empty(self) -> bool: ...
    @property
    def supports_duplicate_keys(self) -> bool: ...
    def keys(self) -> list[str]: ...
    def items(self) -> list[tuple[str, str | None]]: ...
    def add(self, key: str, value: object) -> None: ...
    def set(self, key: str, value: object) -> None: ...
    def contains_key(self, key: str) -> bool: ...
    def get_string(self, key: str) -> str | None: ...
    def get_list(self, key: str) -> list[str | None]: ...
    def get_int32(self, key: str) -> int: ...
    def get_int64(self, key: str) -> int: ...
    def get_boolean(self, key: str) -> bool: ...
    def get_double(self, key: str) -> float: ...
    def get_float(self, key: str) -> float: ...
    def to_string(self) -> str: ...
    def __str__(self) -> str: ...
