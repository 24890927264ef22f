from __future__ import annotations

from typing import Any, Dict, Optional

import requests


class FinnhubRestClient:
    """Minimal Finnhub REST quote client."""

    DEFAULT_BASE_URL = "https://finnhub.io/api/v1"

    def __init__(
        self,
        api_key: str,
        session: Optional[Any] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key is required")

        self.api_key = api_key
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.session = session or requests
        self.timeout = timeout

    def get_quote(self, symbol: str) -> Dict[str, Any]:
        """Return the raw quote payload (``c, d, dp, h, l, o, pc, t``) for ``symbol``."""
        response = self.session.get(
            f"{self.base_url}/quote",
            params={"symbol": symbol, "token": self.api_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError("quote payload must be an object")
        return payload
