"""Options for a Google Analytics data query.

``AnalyticsDataOptions`` is the request-side counterpart of
``AnalyticsDataResponse``: it describes what to fetch and renders itself as
a ``QueryString`` using the parameter names of the ``data/ga`` endpoint.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from skylark.http.query import QueryString


def _date(value: date | str) -> str:
    """Dates go out as ``YYYY-MM-DD``; strings (``"today"``, ``"7daysAgo"``) as-is."""
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return value


@dataclass(frozen=True, slots=True)
class AnalyticsDataOptions:
    """What to fetch from the ``data/ga`` endpoint.

    Usage::

        options = AnalyticsDataOptions(
            ids="ga:12345",
            start_date=date(2024, 1, 1),
            end_date="today",
            metrics=("ga:sessions", "ga:users"),
            dimensions=("ga:date",),
        )
        str(options.to_query_string())
    """

    ids: str
    start_date: date | str = "30daysAgo"
    end_date: date | str = "today"
    metrics: Sequence[str] = ()
    dimensions: Sequence[str] = ()
    sort: Sequence[str] = ()
    filters: str | None = None
    segment: str | None = None
    start_index: int | None = None
    max_results: int | None = None

    def __post_init__(self) -> None:
        if not self.ids or not self.ids.strip():
            msg = "AnalyticsDataOptions requires a profile id (e.g. 'ga:12345')"
            raise ValueError(msg)
        if not self.metrics:
            msg = "AnalyticsDataOptions requires at least one metric"
            raise ValueError(msg)

    def to_query_string(self) -> QueryString:
        """Render the options as query parameters, omitting unset ones."""
        query = QueryString()
        query.add("ids", self.ids)
        query.add("start-date", _date(self.start_date))
        query.add("end-date", _date(self.end_date))
        query.add("metrics", ",".join(self.metrics))
        if self.dimensions:
            query.add("dimensions", ",".join(self.dimensions))
        if self.sort:
            query.add("sort", ",".join(self.sort))
        if self.filters:
            query.add("filters", self.filters)
        if self.segment:
            query.add("segment", self.segment)
        if self.start_index is not None:
            query.add("start-index", self.start_index)
        if self.max_results is not None:
            query.add("max-results", self.max_results)
        return query
