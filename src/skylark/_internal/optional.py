"""Lazy access to optional third-party dependencies."""

from typing import Any

from skylark.errors import ProviderNotInstalledError


def get_httpx() -> Any:
    """Import httpx or raise a clear error."""
    try:
        import httpx

        return httpx
    except ImportError:
        msg = (
            "skylark requires 'httpx' to build httpx requests. "
            "Install it with: pip install skylark[http]"
        )
        raise ProviderNotInstalledError(msg) from None
