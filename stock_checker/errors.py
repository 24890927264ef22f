class StockLookupError(Exception):
    """Base error for quote lookups; carries the HTTP status and client-safe message."""

    status_code = 500
    default_message = "Failed to fetch stock data"

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class TickerRequiredError(StockLookupError):
    status_code = 400
    default_message = "Ticker symbol is required"


class ProviderNotConfiguredError(StockLookupError):
    status_code = 500
    default_message = "Finnhub API key not configured"


class UpstreamQuoteError(StockLookupError):
    status_code = 500
    default_message = "Failed to fetch stock data"
