import unittest

from stock_checker.config.settings import Settings
from stock_checker.errors import (
    ProviderNotConfiguredError,
    TickerRequiredError,
    UpstreamQuoteError,
)
from stock_checker.integrations.finnhub_rest import FinnhubRestClient
from stock_checker.services.stock_quote import (
    StockQuoteService,
    _default_client_factory,
    map_quote,
    normalize_ticker,
)


class StubClient:
    def __init__(self, payload) -> None:
        self.payload = payload
        self.calls = 0

    def get_quote(self, symbol: str):
        self.calls += 1
        return self.payload


class StockQuoteServiceTest(unittest.TestCase):
    def _service(self, client, api_key="test-api-key"):
        settings = Settings(FINNHUB_API_KEY=api_key)
        return StockQuoteService(get_settings=lambda: settings, client_factory=lambda _s: client)

    def test_normalize_ticker(self):
        self.assertEqual(normalize_ticker("aapl"), "AAPL")
        self.assertEqual(normalize_ticker("brk.b"), "BRK.B")
        self.assertEqual(normalize_ticker(" tsla "), " TSLA ")
        self.assertEqual(normalize_ticker("   "), "   ")
        for raw in (None, ""):
            with self.assertRaises(TickerRequiredError):
                normalize_ticker(raw)

    def test_map_quote_coerces_numeric_strings(self):
        quote = map_quote("AAPL", {"c": "150.25"})

        self.assertEqual(quote.current_price, 150.25)
        self.assertIsNone(quote.open)

    def test_map_quote_copies_named_fields(self):
        quote = map_quote("AAPL", {"c": 1.0, "d": 2.0, "dp": 3.0, "h": 4.0, "l": 5.0, "o": 6.0, "pc": 7.0, "t": 99})

        self.assertEqual(quote.current_price, 1.0)
        self.assertEqual(quote.change, 2.0)
        self.assertEqual(quote.change_percent, 3.0)
        self.assertEqual(quote.high, 4.0)
        self.assertEqual(quote.low, 5.0)
        self.assertEqual(quote.open, 6.0)
        self.assertEqual(quote.previous_close, 7.0)

    def test_lookup_returns_uppercased_ticker(self):
        client = StubClient({"c": 100, "o": 99})
        quote = self._service(client).lookup("nvda")

        self.assertEqual(quote.ticker, "NVDA")
        self.assertEqual(quote.current_price, 100.0)
        self.assertEqual(client.calls, 1)

    def test_error_status_codes(self):
        self.assertEqual(TickerRequiredError().status_code, 400)
        self.assertEqual(ProviderNotConfiguredError().status_code, 500)
        self.assertEqual(UpstreamQuoteError().message, "Failed to fetch stock data")

    def test_blank_api_key_counts_as_missing(self):
        client = StubClient({"c": 1})
        with self.assertRaises(ProviderNotConfiguredError):
            self._service(client, api_key="  ").lookup("AAPL")
        self.assertEqual(client.calls, 0)

    def test_unparseable_numeric_field_is_upstream_failure(self):
        client = StubClient({"c": "not-a-number"})
        with self.assertRaises(UpstreamQuoteError) as ctx:
            self._service(client).lookup("AAPL")
        self.assertIsInstance(ctx.exception.__cause__, ValueError)

    def test_default_factory_builds_finnhub_client_from_settings(self):
        settings = Settings(
            FINNHUB_API_KEY="k",
            FINNHUB_BASE_URL="https://example.test/api/",
            FINNHUB_TIMEOUT_SEC=3,
        )
        client = _default_client_factory(settings)

        self.assertIsInstance(client, FinnhubRestClient)
        self.assertEqual(client.base_url, "https://example.test/api")
        self.assertEqual(client.timeout, 3.0)


if __name__ == "__main__":
    unittest.main()
