import pytest

from domain.pricing import FxRate
from services.quote_store import QuoteStore
from tests.constants import EUR, TRANSACTION_FEE, USD, USD_EUR_RATE
from tests.helpers.time_utils import FixedClock, SequentialIds


@pytest.fixture(scope="function")
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture(scope="function")
def quote_ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture(scope="function")
def usd_eur_rate() -> FxRate:
    return FxRate(base_currency=USD, quote_currency=EUR, rate=USD_EUR_RATE)


@pytest.fixture(scope="function")
def quote_store(usd_eur_rate: FxRate, clock: FixedClock, quote_ids: SequentialIds) -> QuoteStore:
    return QuoteStore(
        rates=[usd_eur_rate],
        transaction_fee=TRANSACTION_FEE,
        clock=clock,
        id_generator=quote_ids,
    )
