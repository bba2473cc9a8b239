from __future__ import annotations

from decimal import Decimal
from functools import cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.pricing import FxRate


def _default_rates() -> list[FxRate]:
    return [FxRate(base_currency="USD", quote_currency="EUR", rate=Decimal("0.90"))]


class AppSettings(BaseSettings):
    transaction_fee: Decimal = Decimal("2.50")
    # JSON list in the environment, e.g.
    # FX_RATES='[{"base_currency": "USD", "quote_currency": "EUR", "rate": "0.90"}]'
    fx_rates: list[FxRate] = Field(default_factory=_default_rates)
    quote_ttl_hours: int = 24
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@cache
def config() -> AppSettings:
    return AppSettings()
