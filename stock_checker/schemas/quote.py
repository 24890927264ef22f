from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StockQuote(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ticker: str
    current_price: float | None = None
    change: float | None = None
    change_percent: float | None = None
    high: float | None = None
    low: float | None = None
    open: float | None = None
    previous_close: float | None = None


class StockError(BaseModel):
    error: str
