"""Google Analytics data feed response.

``AnalyticsDataResponse.parse`` checks for an API error before reading any
other field: an error payload always raises ``GoogleApiError``, even when
the rest of the payload is malformed. A response is never returned half
built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from skylark.google.analytics.objects import (
    AnalyticsDataColumnHeader,
    AnalyticsDataQuery,
    AnalyticsDataRow,
)
from skylark.google.errors import GoogleApiError
from skylark.json import JsonObject, parse_object

logger = logging.getLogger("skylark.google")


@dataclass(frozen=True, slots=True)
class AnalyticsDataResponse:
    """Parsed response of the ``data/ga`` endpoint.

    ``rows`` is always a tuple; a payload without ``rows`` (no data for the
    requested range) yields ``()``.
    """

    total_results: int = 0
    items_per_page: int = 0
    query: AnalyticsDataQuery | None = None
    column_headers: tuple[AnalyticsDataColumnHeader, ...] = ()
    rows: tuple[AnalyticsDataRow, ...] = ()

    @classmethod
    def parse_json(cls, text: str | bytes) -> AnalyticsDataResponse:
        """Parse raw JSON text. Raises ``JsonError`` if it is not an object."""
        return cls._from_object(parse_object(text))

    @classmethod
    def parse(cls, obj: JsonObject | None) -> AnalyticsDataResponse | None:
        """Build a response from a JSON object, or return ``None`` for ``None``.

        Raises:
            GoogleApiError: The payload carries an ``error`` object.
        """
        if obj is None:
            return None
        return cls._from_object(obj)

    @classmethod
    def _from_object(cls, obj: JsonObject) -> AnalyticsDataResponse:
        if obj.has_value("error"):
            error: JsonObject = obj.get_object("error")  # type: ignore[assignment]
            code = error.get_int("code")
            message = error.get_string("message") or ""
            logger.debug("Google Analytics API error %d: %s", code, message)
            raise GoogleApiError(code, message)

        headers = obj.get_array("columnHeaders", AnalyticsDataColumnHeader.parse)

        rows: tuple[AnalyticsDataRow, ...] = ()
        array = obj.get_array("rows")
        if array is not None:
            rows = tuple(
                AnalyticsDataRow(index=i, cells=array.get_array(i).cast(str))
                for i in range(array.length)
            )

        return cls(
            total_results=obj.get_int("totalResults"),
            items_per_page=obj.get_int("itemsPerPage"),
            query=obj.get_object("query", AnalyticsDataQuery.parse),
            column_headers=tuple(headers or ()),
            rows=rows,
        )
