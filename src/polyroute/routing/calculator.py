"""Single-hop output calculation."""

from decimal import Decimal, InvalidOperation
from typing import Optional

from polyroute.routing.base import SwapStep
from polyroute.routing.fees import VenueFeeModel
from polyroute.routing.rates import RateTable


def to_decimal(value) -> Optional[Decimal]:
    """Coerce a number to Decimal, or None if it is not a finite number."""
    if isinstance(value, bool):
        return None
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not amount.is_finite():
        return None
    return amount


class SwapCalculator:
    """Applies rate and venue fee to price one hop.

    amount_out = amount_in * rate * fee_factor
    """

    def __init__(self, rates: Optional[RateTable] = None, fees: Optional[VenueFeeModel] = None):
        self.rates = rates or RateTable()
        self.fees = fees or VenueFeeModel()

    def compute_step(self, amount_in, token_in: str, token_out: str, venue: str) -> Decimal:
        """
        Output quantity of one hop.

        Returns 0 instead of raising for non-positive or non-finite input,
        or when no positive rate can be resolved.
        """
        amount = to_decimal(amount_in)
        if amount is None or amount <= 0:
            return Decimal("0")

        rate = self.fees.rate_override(venue, token_in, token_out)
        if rate is None:
            rate = self.rates.rate(token_in, token_out)
        if rate <= 0:
            return Decimal("0")

        return amount * rate * self.fees.fee_factor(venue, token_in, token_out)

    def swap_step(self, amount_in, token_in: str, token_out: str, venue: str) -> SwapStep:
        """Price one hop and record it."""
        amount = to_decimal(amount_in)
        return SwapStep(
            venue=venue,
            token_in=token_in,
            amount_in=amount if amount is not None else Decimal("0"),
            token_out=token_out,
            amount_out=self.compute_step(amount_in, token_in, token_out, venue),
        )
