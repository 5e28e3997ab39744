"""Best single-venue route selection."""

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from typing import Optional

from polyroute.routing.base import SwapStep
from polyroute.routing.calculator import SwapCalculator

logger = logging.getLogger(__name__)


# Major venues compared for a direct hop, in tie-break order
DIRECT_VENUES: tuple[str, ...] = ("Quickswap", "Sushiswap", "Uniswap", "Curve")


class DirectRouteSelector:
    """Compares one hop across the direct venue catalog and keeps the best."""

    def __init__(
        self,
        calculator: Optional[SwapCalculator] = None,
        venues: tuple[str, ...] = DIRECT_VENUES,
        max_workers: int = 0,
    ):
        self.calculator = calculator or SwapCalculator()
        self.venues = tuple(venues)
        self.max_workers = max_workers

    def all_direct(self, asset_in: str, asset_out: str, amount: Decimal) -> list[SwapStep]:
        """Price the hop on every venue, in catalog order."""
        asset_in = asset_in.upper()
        asset_out = asset_out.upper()
        if asset_in == asset_out:
            return []

        def price(venue: str) -> SwapStep:
            return self.calculator.swap_step(amount, asset_in, asset_out, venue)

        if self.max_workers > 1 and len(self.venues) > 1:
            # map() keeps catalog order, so the tie-break is unchanged
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                steps = list(pool.map(price, self.venues))
        else:
            steps = [price(venue) for venue in self.venues]

        for step in steps:
            logger.debug(
                f"Direct {step.venue}: {step.amount_in} {asset_in} -> {step.amount_out} {asset_out}"
            )
        return steps

    def best_direct(self, asset_in: str, asset_out: str, amount: Decimal) -> Optional[SwapStep]:
        """
        Get the highest-output single hop.

        Returns None for a same-asset pair or when no venue gives positive output.
        Ties keep the venue listed first.
        """
        asset_in = asset_in.upper()
        asset_out = asset_out.upper()
        if asset_in == asset_out:
            return None

        best: Optional[SwapStep] = None
        for step in self.all_direct(asset_in, asset_out, amount):
            if step.amount_out <= 0:
                continue
            if best is None or step.amount_out > best.amount_out:
                best = step

        if best is None:
            logger.warning(f"No direct route for {amount} {asset_in} -> {asset_out}")
            return None

        logger.info(
            f"Best direct: {best.venue} - {best.amount_out} {asset_out} "
            f"(effective rate: {best.effective_rate:.6f})"
        )
        return best
