import os
from functools import lru_cache

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    FINNHUB_API_KEY: str | None = None
    FINNHUB_BASE_URL: str = "https://finnhub.io/api/v1"
    FINNHUB_TIMEOUT_SEC: float | None = None

    @field_validator("FINNHUB_API_KEY", "FINNHUB_TIMEOUT_SEC", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("FINNHUB_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def finnhub_configured(self) -> bool:
        return self.FINNHUB_API_KEY is not None

    @classmethod
    def from_env(cls) -> "Settings":
        raw = {
            "FINNHUB_API_KEY": os.getenv("FINNHUB_API_KEY"),
            "FINNHUB_BASE_URL": os.getenv("FINNHUB_BASE_URL"),
            "FINNHUB_TIMEOUT_SEC": os.getenv("FINNHUB_TIMEOUT_SEC"),
        }
        return cls.model_validate({k: v for k, v in raw.items() if v is not None})


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
