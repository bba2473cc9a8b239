from datetime import timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from domain.pricing import Fee, FxRate, TransferQuote
from tests.constants import EUR, GBP, USD
from tests.helpers.time_utils import BASE_TIME, epoch_ms


def _quote(**overrides: object) -> TransferQuote:
    values: dict[str, object] = {
        "id": "quote-1",
        "account_currency": EUR,
        "fees_total": "2.50",
        "fees": (Fee(description="Transaction fee", amount="2.50"),),
        "rates": (),
        "expires_at_ms": epoch_ms(BASE_TIME + timedelta(days=1)),
    }
    values.update(overrides)
    return TransferQuote.model_validate(values)


def test_quotes_with_same_fields_are_equal() -> None:
    rate = FxRate(base_currency=USD, quote_currency=EUR, rate=Decimal("0.90"))

    assert _quote(rates=(rate,)) == _quote(rates=(rate,))
    assert _quote() != _quote(fees_total="3.00")
    assert _quote() != _quote(rates=(rate,))


def test_quote_is_immutable() -> None:
    quote = _quote()

    with pytest.raises(ValidationError):
        quote.fees_total = "0.00"  # type: ignore[misc]


def test_is_expired_compares_against_expiry_timestamp() -> None:
    quote = _quote()

    assert not quote.is_expired(BASE_TIME)
    assert not quote.is_expired(BASE_TIME + timedelta(hours=23, minutes=59))
    assert quote.is_expired(BASE_TIME + timedelta(days=1))
    assert quote.is_expired(BASE_TIME + timedelta(days=2))


def test_fx_rate_matches_exact_pair_only() -> None:
    rate = FxRate(base_currency=USD, quote_currency=EUR, rate=Decimal("0.90"))

    assert rate.matches(USD, EUR)
    assert not rate.matches(EUR, USD)
    assert not rate.matches(USD, GBP)
    assert not rate.matches("usd", "eur")


def test_fx_rate_requires_currencies() -> None:
    with pytest.raises(ValidationError):
        FxRate(base_currency="", quote_currency=EUR, rate=Decimal("1"))


def test_quote_json_keeps_decimal_strings() -> None:
    rate = FxRate(base_currency=USD, quote_currency=EUR, rate=Decimal("0.90"))
    dumped = _quote(rates=(rate,)).model_dump(mode="json")

    assert dumped["fees_total"] == "2.50"
    assert dumped["fees"] == [{"description": "Transaction fee", "amount": "2.50"}]
    assert dumped["rates"] == [{"base_currency": USD, "quote_currency": EUR, "rate": "0.90"}]
