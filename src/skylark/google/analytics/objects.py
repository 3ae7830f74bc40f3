"""Google Analytics data feed objects.

Frozen dataclasses parsed from the Core Reporting API (v3) ``data/ga``
response. Each ``parse`` classmethod takes a ``JsonObject`` and returns
``None`` when given ``None``, so they can be handed straight to
``JsonObject.get_object`` / ``get_array`` as parsers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from skylark.json import JsonObject


def _split_list(obj: JsonObject, key: str) -> tuple[str, ...]:
    """Read a field the API sends either as ``"a,b"`` or ``["a", "b"]``."""
    value: Any = obj.raw.get(key)
    if value is None:
        return ()
    if isinstance(value, list):
        return tuple(str(item) for item in value if item is not None)
    return tuple(part for part in str(value).split(",") if part)


@dataclass(frozen=True, slots=True)
class AnalyticsDataQuery:
    """Echo of the query that produced a data response."""

    ids: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    metrics: tuple[str, ...] = ()
    dimensions: tuple[str, ...] = ()
    sort: tuple[str, ...] = ()
    filters: str | None = None
    segment: str | None = None
    start_index: int = 0
    max_results: int = 0

    @classmethod
    def parse(cls, obj: JsonObject | None) -> AnalyticsDataQuery | None:
        if obj is None:
            return None
        return cls(
            ids=obj.get_string("ids"),
            start_date=obj.get_string("start-date"),
            end_date=obj.get_string("end-date"),
            metrics=_split_list(obj, "metrics"),
            dimensions=_split_list(obj, "dimensions"),
            sort=_split_list(obj, "sort"),
            filters=obj.get_string("filters"),
            segment=obj.get_string("segment"),
            start_index=obj.get_int("start-index"),
            max_results=obj.get_int("max-results"),
        )


@dataclass(frozen=True, slots=True)
class AnalyticsDataColumnHeader:
    """Metadata for one column of the data table.

    ``column_type`` is ``DIMENSION`` or ``METRIC``; ``data_type`` is the
    API's type name (``STRING``, ``INTEGER``, ``PERCENT``, ``TIME``, ...).
    """

    name: str | None
    column_type: str | None
    data_type: str | None

    @classmethod
    def parse(cls, obj: JsonObject | None) -> AnalyticsDataColumnHeader | None:
        if obj is None:
            return None
        return cls(
            name=obj.get_string("name"),
            column_type=obj.get_string("columnType"),
            data_type=obj.get_string("dataType"),
        )


@dataclass(frozen=True, slots=True)
class AnalyticsDataRow:
    """One row of the data table: its position and its cells as strings."""

    index: int
    cells: tuple[str | None, ...]

    def __getitem__(self, position: int) -> str | None:
        return self.cells[position]

    def __len__(self) -> int:
        return len(self.cells)
