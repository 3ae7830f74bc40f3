"""Request building for the Google Analytics data endpoint.

Builds the URL and headers for a ``data/ga`` GET request. Sending it is up
to the caller; ``to_httpx()`` hands back an ``httpx.Request`` ready for
``client.send()``. Requires ``httpx`` only for that method::

    pip install skylark[http]
"""

from __future__ import annotations

import logging
from typing import Any

from skylark._internal.optional import get_httpx
from skylark.config import GoogleConfig
from skylark.google.analytics.options import AnalyticsDataOptions
from skylark.http.query import QueryString

logger = logging.getLogger("skylark.google")


class AnalyticsRequest:
    """A ``data/ga`` request, built from options and a config."""

    __slots__ = ("config", "options")

    def __init__(self, options: AnalyticsDataOptions, config: GoogleConfig | None = None) -> None:
        self.options = options
        self.config = config or GoogleConfig()

    @property
    def query(self) -> QueryString:
        """Query parameters, including the API key when one is configured."""
        query = self.options.to_query_string()
        if self.config.api_key:
            query.set("key", self.config.api_key)
        return query

    @property
    def url(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/data/ga?{self.query}"

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.config.access_token:
            headers["Authorization"] = f"Bearer {self.config.access_token}"
        return headers

    def to_httpx(self) -> Any:
        """Return an unsent ``httpx.Request`` for this query."""
        httpx = get_httpx()
        url = self.url
        logger.debug("Built Google Analytics request for %s", self.options.ids)
        return httpx.Request(
            "GET",
            url,
            headers=self.headers,
            extensions={"timeout": httpx.Timeout(self.config.timeout).as_dict()},
        )
