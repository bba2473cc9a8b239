from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from pydantic import BaseModel, ConfigDict, model_validator


class FxRate(BaseModel):
    """Conversion rate for one currency pair, taken from the configured catalog."""

    model_config = ConfigDict(frozen=True)

    base_currency: str
    quote_currency: str
    rate: Decimal

    @model_validator(mode="after")
    def _validate_currencies(self) -> FxRate:
        if not self.base_currency or not self.quote_currency:
            raise ValueError("FxRate currencies must be non-empty")
        return self

    def matches(self, base_currency: str, quote_currency: str) -> bool:
        return self.base_currency == base_currency and self.quote_currency == quote_currency


class Fee(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    amount: str


class TransferQuote(BaseModel):
    """Priced offer a transfer can later be executed against.

    Amounts are plain decimal strings so a quote compares equal to itself
    after being handed out and passed back for redemption. ``rates`` is empty
    on the beneficiary (credit) side and holds the applied rate on the
    remitter (debit) side.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    account_currency: str
    fees_total: str
    expires_at_ms: int
    fees: tuple[Fee, ...] = ()
    rates: tuple[FxRate, ...] = ()

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at_ms <= int(now.timestamp() * 1000)


class Pricing(Protocol):
    """Quote lifecycle used by transfer preparation."""

    def lookup_quote(self, quote_id: str) -> TransferQuote: ...

    def credit_quote(self, base_currency: str, quote_currency: str) -> TransferQuote: ...

    def debit_quote(self, base_currency: str, quote_currency: str) -> TransferQuote: ...

    def redeem_quote(self, quote: TransferQuote) -> TransferQuote: ...


__all__ = ["Fee", "FxRate", "Pricing", "TransferQuote"]
