from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pricing import TransferQuote


class TransferFailure(StrEnum):
    FAILURE_INVALID_QUOTE = "FAILURE_INVALID_QUOTE"
    FAILURE_INVALID_CURRENCY = "FAILURE_INVALID_CURRENCY"


class PrepareTransferError(Exception):
    def __init__(self, status: TransferFailure, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


class InvalidQuoteError(PrepareTransferError):
    def __init__(
        self,
        message: str,
        *,
        quote_id: str | None = None,
        quote: TransferQuote | None = None,
    ) -> None:
        super().__init__(TransferFailure.FAILURE_INVALID_QUOTE, message)
        self.quote_id = quote_id if quote_id is not None else (quote.id if quote is not None else None)
        self.quote = quote


class InvalidCurrencyError(PrepareTransferError):
    def __init__(self, *, base_currency: str, quote_currency: str) -> None:
        self.base_currency = base_currency
        self.quote_currency = quote_currency
        message = f"FX rate not found {base_currency} -> {quote_currency}"
        super().__init__(TransferFailure.FAILURE_INVALID_CURRENCY, message)


__all__ = [
    "InvalidCurrencyError",
    "InvalidQuoteError",
    "PrepareTransferError",
    "TransferFailure",
]
