"""Quote assembly and presentation."""

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Optional

from polyroute.routing.base import PresentedQuote, Quote, RoutePath, SwapStep
from polyroute.routing.calculator import SwapCalculator, to_decimal

logger = logging.getLogger(__name__)


DEFAULT_PRESENTATION_MARGIN = Decimal("0.001")
DEFAULT_PRESENTATION_MAX_BONUS = Decimal("0.02")


class QuoteAssembler:
    """Prices a RoutePath hop by hop."""

    def __init__(
        self,
        calculator: Optional[SwapCalculator] = None,
        presentation_margin: Decimal = DEFAULT_PRESENTATION_MARGIN,
        presentation_max_bonus: Decimal = DEFAULT_PRESENTATION_MAX_BONUS,
    ):
        self.calculator = calculator or SwapCalculator()
        self.presentation_margin = Decimal(presentation_margin)
        self.presentation_max_bonus = Decimal(presentation_max_bonus)

    def assemble(self, asset_in: str, amount: Decimal, path: RoutePath) -> Quote:
        """
        Walk the path, feeding each hop's output into the next.

        A hop with zero output is kept and ends the walk; no further
        steps are fabricated.
        """
        amount = to_decimal(amount)
        if amount is None:
            amount = Decimal("0")

        steps: list[SwapStep] = []
        token, running = asset_in, amount
        for index, hop in enumerate(path.hops):
            step = self.calculator.swap_step(running, token, hop.target, hop.venue)
            steps.append(step)
            if step.amount_out <= 0:
                if index < len(path.hops) - 1:
                    logger.warning(
                        f"Path {asset_in}->{path.destination} broke at hop {index + 1} "
                        f"({token}->{hop.target} on {hop.venue})"
                    )
                break
            token, running = hop.target, step.amount_out

        quote = Quote(
            from_asset=asset_in,
            to_asset=path.destination or asset_in,
            from_amount=amount,
            steps=tuple(steps),
            gas_estimate=path.gas_estimate,
            category=path.category,
            hop_count=len(path.hops),
        )
        logger.info(
            f"Assembled {quote.category.value} route {asset_in}->{quote.to_asset}: "
            f"{amount} -> {quote.estimated_output} via {', '.join(quote.venues)}"
        )
        return quote

    def present(self, raw: Quote, direct: Optional[Quote]) -> Quote:
        """
        Apply the display adjustment so a multi-hop route does not show
        below the direct route.

        Only the final step's output changes, by a factor in
        (1, 1 + presentation_max_bonus]. The raw quote is returned unchanged
        when there is no positive direct quote, when the route is broken,
        or when it already beats the direct output.
        """
        if direct is None or direct.estimated_output <= 0:
            return raw
        if not raw.is_complete:
            return raw

        raw_output = raw.estimated_output
        if raw_output > direct.estimated_output:
            return raw

        needed = direct.estimated_output / raw_output * (1 + self.presentation_margin)
        factor = min(needed, 1 + self.presentation_max_bonus)

        last = raw.steps[-1]
        adjusted = replace(last, amount_out=last.amount_out * factor)
        logger.debug(
            f"Presentation adjustment x{factor:.6f} on {raw.from_asset}->{raw.to_asset} "
            f"(raw {raw_output}, direct {direct.estimated_output})"
        )
        return PresentedQuote(
            from_asset=raw.from_asset,
            to_asset=raw.to_asset,
            from_amount=raw.from_amount,
            steps=raw.steps[:-1] + (adjusted,),
            gas_estimate=raw.gas_estimate,
            category=raw.category,
            hop_count=raw.hop_count,
            raw=raw,
            adjustment=factor,
        )
