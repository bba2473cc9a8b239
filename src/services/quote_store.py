from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable, Iterable
from uuid import uuid4

from config import AppSettings, config
from domain.errors import InvalidCurrencyError, InvalidQuoteError
from domain.pricing import Fee, FxRate, Pricing, TransferQuote
from utils.formatting import to_plain_string

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
IdGenerator = Callable[[], str]

TRANSACTION_FEE_DESCRIPTION = "Transaction fee"
DEFAULT_QUOTE_TTL = timedelta(days=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def random_quote_id() -> str:
    return str(uuid4())


class QuoteStore(Pricing):
    """Configuration based pricing: a fixed rate catalog, a flat fee and the issued quotes.

    Quotes live in memory until redeemed. ``expires_at_ms`` is informational;
    nothing here evicts or rejects expired quotes, callers check it with
    :meth:`TransferQuote.is_expired` when they care.
    """

    def __init__(
        self,
        rates: Iterable[FxRate],
        transaction_fee: Decimal,
        *,
        clock: Clock = utc_now,
        id_generator: IdGenerator = random_quote_id,
        quote_ttl: timedelta = DEFAULT_QUOTE_TTL,
    ) -> None:
        self._rates = tuple(rates)
        self._transaction_fee = transaction_fee
        self._clock = clock
        self._id_generator = id_generator
        self._quote_ttl = quote_ttl
        self._quotes: dict[str, TransferQuote] = {}
        self._lock = threading.Lock()

    @property
    def rates(self) -> tuple[FxRate, ...]:
        return self._rates

    @property
    def transaction_fee(self) -> Decimal:
        return self._transaction_fee

    def lookup_quote(self, quote_id: str) -> TransferQuote:
        with self._lock:
            quote = self._quotes.get(quote_id)
        if quote is None:
            logger.warning("Price quote lookup failed: %s", quote_id)
            raise InvalidQuoteError(f"Price quote not found: {quote_id}", quote_id=quote_id)
        return quote

    def credit_quote(self, base_currency: str, quote_currency: str) -> TransferQuote:
        # Only remitter side FX is supported, the beneficiary side just pays fees.
        quote = self._build_quote(quote_currency, rate=None)
        self._insert(quote)
        logger.debug("Issued credit quote %s for %s -> %s", quote.id, base_currency, quote_currency)
        return quote

    def debit_quote(self, base_currency: str, quote_currency: str) -> TransferQuote:
        rate = self._find_rate(base_currency, quote_currency)
        if rate is None:
            logger.warning("No FX rate configured for %s -> %s", base_currency, quote_currency)
            raise InvalidCurrencyError(base_currency=base_currency, quote_currency=quote_currency)

        quote = self._build_quote(quote_currency, rate=rate)
        self._insert(quote)
        logger.debug("Issued debit quote %s for %s -> %s at %s", quote.id, base_currency, quote_currency, rate.rate)
        return quote

    def redeem_quote(self, quote: TransferQuote) -> TransferQuote:
        with self._lock:
            stored = self._quotes.pop(quote.id, None)
            if stored is not None and stored != quote:
                self._quotes[stored.id] = stored
                stored = None
        if stored is None:
            logger.warning("Rejected redemption of quote %s", quote.id)
            raise InvalidQuoteError(f"Quote not found: {quote!r}", quote=quote)

        logger.info("Redeemed quote %s", stored.id)
        return stored

    def __len__(self) -> int:
        with self._lock:
            return len(self._quotes)

    def __contains__(self, quote_id: object) -> bool:
        with self._lock:
            return quote_id in self._quotes

    def _find_rate(self, base_currency: str, quote_currency: str) -> FxRate | None:
        # First listed rate wins when the catalog repeats a pair.
        return next((rate for rate in self._rates if rate.matches(base_currency, quote_currency)), None)

    def _build_quote(self, account_currency: str, *, rate: FxRate | None) -> TransferQuote:
        fee_amount = to_plain_string(self._transaction_fee)
        expires_at = self._clock() + self._quote_ttl
        return TransferQuote(
            id=self._id_generator(),
            account_currency=account_currency,
            fees_total=fee_amount,
            fees=(Fee(description=TRANSACTION_FEE_DESCRIPTION, amount=fee_amount),),
            rates=(rate,) if rate is not None else (),
            expires_at_ms=int(expires_at.timestamp() * 1000),
        )

    def _insert(self, quote: TransferQuote) -> None:
        with self._lock:
            self._quotes[quote.id] = quote


def build_default_store(settings: AppSettings | None = None) -> QuoteStore:
    settings = settings or config()
    return QuoteStore(
        rates=settings.fx_rates,
        transaction_fee=settings.transaction_fee,
        quote_ttl=timedelta(hours=settings.quote_ttl_hours),
    )


__all__ = ["Clock", "IdGenerator", "QuoteStore", "build_default_store", "random_quote_id", "utc_now"]
