from fastapi import APIRouter, Request

from stock_checker.schemas.quote import StockError, StockQuote

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": StockError, "description": "Ticker symbol missing"},
    500: {"model": StockError, "description": "Provider not configured or upstream failure"},
}


@router.get('/stock', response_model=StockQuote, responses=_ERROR_RESPONSES)
def get_stock(request: Request, ticker: str | None = None):
    service = request.app.state.stock_quote_service
    return service.lookup(ticker)
