from __future__ import annotations

from typing import Any, Callable

import requests

from stock_checker.config.settings import Settings
from stock_checker.errors import (
    ProviderNotConfiguredError,
    TickerRequiredError,
    UpstreamQuoteError,
)
from stock_checker.integrations.finnhub_rest import FinnhubRestClient
from stock_checker.schemas.quote import StockQuote

# provider field -> StockQuote attribute
_FIELD_MAP = {
    "c": "current_price",
    "d": "change",
    "dp": "change_percent",
    "h": "high",
    "l": "low",
    "o": "open",
    "pc": "previous_close",
}


def _default_client_factory(settings: Settings) -> FinnhubRestClient:
    return FinnhubRestClient(
        api_key=settings.FINNHUB_API_KEY,
        base_url=settings.FINNHUB_BASE_URL,
        timeout=settings.FINNHUB_TIMEOUT_SEC,
    )


def normalize_ticker(raw: str | None) -> str:
    if not raw:
        raise TickerRequiredError()
    return raw.upper()


def map_quote(ticker: str, payload: dict[str, Any]) -> StockQuote:
    """Copy the provider fields; values are coerced to float, absent ones stay None."""
    fields = {attr: payload.get(key) for key, attr in _FIELD_MAP.items()}
    return StockQuote(ticker=ticker, **fields)


class StockQuoteService:
    """Validate -> single provider call -> reshape. Stateless across requests."""

    def __init__(
        self,
        *,
        get_settings: Callable[[], Settings],
        client_factory: Callable[[Settings], Any] | None = None,
    ) -> None:
        self.get_settings = get_settings
        self.client_factory = client_factory or _default_client_factory

    def lookup(self, raw_ticker: str | None) -> StockQuote:
        ticker = normalize_ticker(raw_ticker)

        settings = self.get_settings()
        if not settings.finnhub_configured:
            print(f"[QUOTE][provider_not_configured] symbol={ticker}", flush=True)
            raise ProviderNotConfiguredError()

        client = self.client_factory(settings)
        try:
            payload = client.get_quote(ticker)
            return map_quote(ticker, payload)
        except (requests.RequestException, OSError, ValueError) as exc:
            print(f"[QUOTE][upstream_error] symbol={ticker} error={exc}", flush=True)
            raise UpstreamQuoteError() from exc
