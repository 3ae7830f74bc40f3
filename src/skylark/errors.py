"""Skylark exception hierarchy.

Shared across the query string, the JSON tree, and the provider parsers so
every module raises and catches the same types.
"""


class SkylarkError(Exception):
    """Base for all skylark-specific errors."""


class InvalidKeyError(SkylarkError, ValueError):
    """Raised when a query string operation receives a blank or missing key.

    Nothing is written to the query string when this is raised.
    """

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"Key must be a non-blank string, got {key!r}")


class ConversionError(SkylarkError, ValueError):
    """Raised when a stored value cannot be parsed as the requested type."""

    def __init__(self, key: str, value: str, target: str) -> None:
        self.key = key
        self.value = value
        self.target = target
        super().__init__(f"Value {value!r} of {key!r} is not a valid {target}")


class ApiError(SkylarkError):
    """Raised when an API response carries an error object."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(code, message)

    def __str__(self) -> str:
        if self.message:
            return f"{self.code}: {self.message}"
        return str(self.code)


class JsonError(SkylarkError):
    """Raised when JSON text or a JSON value does not have the expected shape."""


class ProviderNotInstalledError(SkylarkError):
    """Raised when httpx is not installed."""
