"""Client configuration.

GoogleConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_ANALYTICS_BASE = "https://www.googleapis.com/analytics/v3"


@dataclass(frozen=True, slots=True)
class GoogleConfig:
    """Google API configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = GoogleConfig(access_token="ya29...", timeout=10.0)
    """

    # Endpoint
    base_url: str = DEFAULT_ANALYTICS_BASE

    # Credentials (either is enough for read-only reporting)
    access_token: str = ""
    api_key: str = ""

    # Passed through to httpx when a request is sent
    timeout: float = 30.0

    @classmethod
    def from_env(
        cls,
        *,
        access_token: str | None = None,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = 30.0,
    ) -> GoogleConfig:
        """Build a config, filling unset values from the environment.

        Values are resolved in order:
            1. Explicit keyword argument
            2. Environment variable (``GOOGLE_ACCESS_TOKEN``, ``GOOGLE_API_KEY``,
               ``GOOGLE_ANALYTICS_BASE``)
            3. Default
        """
        base = base_url or os.environ.get("GOOGLE_ANALYTICS_BASE", DEFAULT_ANALYTICS_BASE)
        return cls(
            base_url=base.rstrip("/"),
            access_token=access_token or os.environ.get("GOOGLE_ACCESS_TOKEN", ""),
            api_key=api_key or os.environ.get("GOOGLE_API_KEY", ""),
            timeout=timeout,
        )
