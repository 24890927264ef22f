from __future__ import annotations

import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stock_checker.api.routes import router
from stock_checker.config.settings import get_settings
from stock_checker.errors import StockLookupError
from stock_checker.services.stock_quote import StockQuoteService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.get_settings()
    print(f"[APP][startup] finnhub_configured={int(settings.finnhub_configured)}", flush=True)
    try:
        yield
    finally:
        print("[APP][shutdown]", flush=True)


app = FastAPI(title="Stock Checker", version="0.1.0", lifespan=lifespan)
app.include_router(router, prefix="/api")


@app.exception_handler(StockLookupError)
async def stock_lookup_error_handler(request: Request, exc: StockLookupError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# NOTE: settings are read per request so a missing key is reported, not fatal at import.
app.state.get_settings = get_settings
app.state.stock_quote_service = StockQuoteService(
    get_settings=lambda: app.state.get_settings(),
)


def run() -> None:
    host = os.getenv("STOCK_CHECKER_API_HOST", "127.0.0.1")
    port = int(os.getenv("STOCK_CHECKER_API_PORT", "8000"))
    uvicorn.run("stock_checker.main:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    run()
