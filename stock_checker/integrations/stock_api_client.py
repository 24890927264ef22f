from __future__ import annotations

from typing import Any, Optional

import requests

from stock_checker.errors import StockLookupError
from stock_checker.schemas.quote import StockQuote


class StockLookupClient:
    """Consumer of ``GET /api/stock``; mirrors what the stocks page does with user input."""

    def __init__(
        self,
        base_url: str = "",
        session: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests
        self.timeout = timeout

    def lookup(self, ticker: str) -> StockQuote:
        value = (ticker or "").strip()
        if not value:
            raise StockLookupError("Please enter a ticker symbol", status_code=400)

        kwargs: dict[str, Any] = {"params": {"ticker": value.upper()}}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            response = self.session.get(f"{self.base_url}/api/stock", **kwargs)
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise StockLookupError() from exc

        if response.status_code >= 400:
            message = payload.get("error") if isinstance(payload, dict) else None
            raise StockLookupError(message, status_code=response.status_code)

        return StockQuote.model_validate(payload)
