"""Skylark — a small client toolkit for social and web APIs.

Builds query strings, parses JSON replies into typed objects, and raises
typed errors when an API reports one. Sending requests is left to you.

Basic usage::

    from skylark import QueryString

    query = QueryString()
    query.add("ids", "ga:12345")
    query.set("max-results", 50)
    str(query)  # 'ids=ga%3A12345&max-results=50'

Google Analytics::

    from skylark.google.analytics import AnalyticsDataResponse
    data = AnalyticsDataResponse.parse_json(body)

httpx interop (``pip install skylark[http]``)::

    params = query.to_httpx()
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ApiError",
    "ConversionError",
    "GoogleConfig",
    "InvalidKeyError",
    "JsonArray",
    "JsonError",
    "JsonObject",
    "ProviderNotInstalledError",
    "QueryString",
    "QueryStringLike",
    "SkylarkError",
    "parse_json",
    "parse_object",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import skylark`` fast while providing a clean top-level API.
    """
    if name == "QueryString":
        from skylark.http.query import QueryString

        return QueryString

    if name == "QueryStringLike":
        from skylark._internal.multimap import QueryStringLike

        return QueryStringLike

    if name == "GoogleConfig":
        from skylark.config import GoogleConfig

        return GoogleConfig

    if name in ("JsonArray", "JsonObject", "parse_json", "parse_object"):
        from skylark import json as _json

        return getattr(_json, name)

    if name in (
        "ApiError",
        "ConversionError",
        "InvalidKeyError",
        "JsonError",
        "ProviderNotInstalledError",
        "SkylarkError",
    ):
        from skylark import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
