"""Google Analytics Core Reporting API (v3).

Build a request, send it with any HTTP client, parse the reply::

    from skylark.config import GoogleConfig
    from skylark.google.analytics import AnalyticsDataOptions, AnalyticsRequest

    options = AnalyticsDataOptions(ids="ga:12345", metrics=("ga:sessions",))
    request = AnalyticsRequest(options, GoogleConfig.from_env())

    with httpx.Client() as client:
        reply = client.send(request.to_httpx())

    data = AnalyticsDataResponse.parse_json(reply.text)
    for row in data.rows:
        print(row.index, row.cells)
"""

from skylark.google.analytics.objects import (
    AnalyticsDataColumnHeader,
    AnalyticsDataQuery,
    AnalyticsDataRow,
)
from skylark.google.analytics.options import AnalyticsDataOptions
from skylark.google.analytics.request import AnalyticsRequest
from skylark.google.analytics.responses import AnalyticsDataResponse

__all__ = [
    "AnalyticsDataColumnHeader",
    "AnalyticsDataOptions",
    "AnalyticsDataQuery",
    "AnalyticsDataResponse",
    "AnalyticsDataRow",
    "AnalyticsRequest",
]
