from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal
from typing import Sequence

from config import AppSettings, config
from domain.errors import PrepareTransferError
from domain.pricing import TransferQuote
from services.quote_store import QuoteStore, build_default_store
from utils.formatting import format_decimal

logger = logging.getLogger(__name__)


def issue_quote(store: QuoteStore, side: str, base_currency: str, quote_currency: str) -> TransferQuote:
    if side == "debit":
        return store.debit_quote(base_currency, quote_currency)
    return store.credit_quote(base_currency, quote_currency)


def print_rates(store: QuoteStore) -> None:
    print("Configured FX rates:")
    for rate in store.rates:
        print(f"  {rate.base_currency} -> {rate.quote_currency}: {format_decimal(rate.rate)}")
    print(f"Transaction fee: {format_decimal(store.transaction_fee)}")


def run(args: argparse.Namespace, settings: AppSettings) -> int:
    if args.fee is not None:
        settings = settings.model_copy(update={"transaction_fee": args.fee})
    store = build_default_store(settings)

    if args.command == "rates":
        print_rates(store)
        return 0

    try:
        quote = issue_quote(store, args.command, args.base.upper(), args.quote.upper())
        print(quote.model_dump_json(indent=2))
        if args.redeem:
            redeemed = store.redeem_quote(quote)
            print(f"Redeemed quote {redeemed.id}")
    except PrepareTransferError as exc:
        logger.error("%s: %s", exc.status, exc.message)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Issue and redeem transfer price quotes.")
    parser.add_argument("--fee", type=Decimal, default=None, help="Override the configured flat transaction fee.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for side, help_text in (
        ("credit", "Beneficiary side quote (fees only)."),
        ("debit", "Remitter side quote (fees and FX rate)."),
    ):
        side_parser = subparsers.add_parser(side, help=help_text)
        side_parser.add_argument("base", help="Base currency code, e.g. USD.")
        side_parser.add_argument("quote", help="Quote currency code, e.g. EUR.")
        side_parser.add_argument("--redeem", action="store_true", help="Redeem the quote right after issuing it.")

    subparsers.add_parser("rates", help="List the configured FX rates and fee.")
    args = parser.parse_args(argv)

    settings = config()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    return run(args, settings)


if __name__ == "__main__":
    sys.exit(main())
