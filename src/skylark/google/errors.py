"""Google API error types."""

from skylark.errors import ApiError


class GoogleApiError(ApiError):
    """Raised when a Google API response carries an ``error`` object.

    Attributes:
        code: The HTTP-style status code reported by the API (e.g. ``403``).
        message: The human-readable message reported by the API.
    """
