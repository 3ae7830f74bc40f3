"""Google API support.

Currently covers the Google Analytics Core Reporting API (``data/ga``)::

    from skylark.google.analytics import AnalyticsDataResponse

    response = AnalyticsDataResponse.parse_json(body)
"""

from skylark.google.errors import GoogleApiError

__all__ = ["GoogleApiError"]
