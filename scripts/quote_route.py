#!/usr/bin/env python3
"""
Quote a swap from the command line.

Prints the best direct (single-venue) quote and the 3-hop multi-venue
route for a pair.

Usage:
    python scripts/quote_route.py USDC POL 100
    python scripts/quote_route.py WETH usdc 1.5 --json
    python scripts/quote_route.py FOO BAR 10 --no-adjust
"""

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from polyroute.config import get_settings
from polyroute.routing.base import PresentedQuote, Quote
from polyroute.routing.engine import create_default_engine


def parse_amount(value: str) -> Decimal:
    """Parse a positive, finite amount."""
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {value}")
    if not amount.is_finite() or amount <= 0:
        raise argparse.ArgumentTypeError(f"amount must be positive and finite: {value}")
    return amount


def print_quote(title: str, quote: Quote, precision: int, gas_precision: int) -> None:
    data = quote.to_dict(precision, gas_precision)
    print(f"\n{title} ({data['category']})")
    for index, step in enumerate(data["steps"], start=1):
        print(
            f"  {index}. {step['amount_in']} {step['token_in']} -> "
            f"{step['amount_out']} {step['token_out']}  [{step['venue']}]"
        )
    print(f"  Output: {data['estimated_output']} {quote.to_asset}")
    print(f"  Gas:    {data['gas_estimate']} POL")
    if isinstance(quote, PresentedQuote):
        print(f"  Raw:    {quote.raw.rounded_output(precision)} (adjusted x{quote.adjustment:.6f})")
    if not quote.is_complete:
        print("  Route broken: a hop had no liquidity")
    elif quote.rounded_output(precision) == 0:
        print(f"  Output rounds to zero at {precision} decimal places")


def main() -> int:
    parser = argparse.ArgumentParser(description="Multi-venue swap quote")
    parser.add_argument("from_asset", type=str, help="Source asset symbol")
    parser.add_argument("to_asset", type=str, help="Destination asset symbol")
    parser.add_argument("amount", type=parse_amount, help="Amount of the source asset")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--no-adjust", action="store_true", help="Show computed values only")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    settings = get_settings()
    engine = create_default_engine(settings)

    direct = engine.quote_direct(args.from_asset, args.to_asset, args.amount)
    prior = None if args.no_adjust else direct
    optimal = engine.quote_optimal(args.from_asset, args.to_asset, args.amount, prior)

    precision = settings.quote_precision
    gas_precision = settings.gas_precision

    if args.json:
        print(json.dumps(
            {
                "direct": direct.to_dict(precision, gas_precision) if direct else None,
                "optimal": optimal.to_dict(precision, gas_precision),
            },
            indent=2,
        ))
        return 0 if optimal.is_complete else 1

    if direct:
        print_quote("Direct route", direct, precision, gas_precision)
    else:
        print("\nDirect route: none")
    print_quote("Multi-hop route", optimal, precision, gas_precision)

    return 0 if optimal.is_complete else 1


if __name__ == "__main__":
    sys.exit(main())
