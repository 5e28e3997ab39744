"""Quote engine: direct and multi-hop quoting over static tables."""

import logging
from decimal import Decimal
from typing import Optional

from polyroute.routing.assembler import QuoteAssembler
from polyroute.routing.base import PathCategory, Quote, RouteQuotes
from polyroute.routing.calculator import SwapCalculator
from polyroute.routing.direct import DirectRouteSelector
from polyroute.routing.fees import VenueFeeModel
from polyroute.routing.paths import PathSynthesizer
from polyroute.routing.rates import RateTable

logger = logging.getLogger(__name__)


DIRECT_GAS = Decimal("0.05")


def normalize_symbol(symbol: str) -> str:
    return symbol.strip().upper()


def _same_request(quote: Quote, other: Quote) -> bool:
    return (
        quote.from_asset == other.from_asset
        and quote.to_asset == other.to_asset
        and quote.from_amount == other.from_amount
    )


class QuoteEngine:
    """Entry point for callers.

    Stateless between requests; the tables it holds are read-only and the
    engine can be shared across threads and tasks.
    """

    def __init__(
        self,
        rates: Optional[RateTable] = None,
        fees: Optional[VenueFeeModel] = None,
        synthesizer: Optional[PathSynthesizer] = None,
        direct_workers: int = 0,
        presentation_enabled: bool = True,
        presentation_margin: Optional[Decimal] = None,
        presentation_max_bonus: Optional[Decimal] = None,
    ):
        self.rates = rates or RateTable()
        self.fees = fees or VenueFeeModel()
        self.calculator = SwapCalculator(self.rates, self.fees)
        self.direct = DirectRouteSelector(self.calculator, max_workers=direct_workers)
        self.synthesizer = synthesizer or PathSynthesizer()

        assembler_kwargs = {}
        if presentation_margin is not None:
            assembler_kwargs["presentation_margin"] = presentation_margin
        if presentation_max_bonus is not None:
            assembler_kwargs["presentation_max_bonus"] = presentation_max_bonus
        self.assembler = QuoteAssembler(self.calculator, **assembler_kwargs)
        self.presentation_enabled = presentation_enabled

    def quote_direct(self, asset_in: str, asset_out: str, amount: Decimal) -> Optional[Quote]:
        """
        Get the best single-venue quote.

        Returns None for a same-asset pair or when no venue gives positive output.
        """
        asset_in = normalize_symbol(asset_in)
        asset_out = normalize_symbol(asset_out)

        step = self.direct.best_direct(asset_in, asset_out, amount)
        if step is None:
            return None

        return Quote(
            from_asset=asset_in,
            to_asset=asset_out,
            from_amount=step.amount_in,
            steps=(step,),
            gas_estimate=DIRECT_GAS,
            category=PathCategory.DIRECT,
            hop_count=1,
        )

    def quote_optimal(
        self,
        asset_in: str,
        asset_out: str,
        amount: Decimal,
        prior_direct: Optional[Quote] = None,
    ) -> Quote:
        """
        Get the multi-hop quote.

        When `prior_direct` is given and presentation is enabled, the result
        may be a PresentedQuote; its `raw` attribute holds the computed quote.
        A `prior_direct` for another pair or amount is ignored.
        """
        raw = self.quote_raw(asset_in, asset_out, amount)
        if not self.presentation_enabled:
            return raw
        if prior_direct is not None and not _same_request(raw, prior_direct):
            logger.warning(
                f"Ignoring direct quote for {prior_direct.from_amount} "
                f"{prior_direct.from_asset}->{prior_direct.to_asset} when quoting "
                f"{raw.from_amount} {raw.from_asset}->{raw.to_asset}"
            )
            return raw
        return self.assembler.present(raw, prior_direct)

    def quote_raw(self, asset_in: str, asset_out: str, amount: Decimal) -> Quote:
        """Get the multi-hop quote without any presentation adjustment."""
        asset_in = normalize_symbol(asset_in)
        asset_out = normalize_symbol(asset_out)

        path = self.synthesizer.synthesize(asset_in, asset_out)
        return self.assembler.assemble(asset_in, amount, path)

    def quote_route(self, asset_in: str, asset_out: str, amount: Decimal) -> RouteQuotes:
        """Direct, raw multi-hop and presented multi-hop quotes in one call."""
        direct = self.quote_direct(asset_in, asset_out, amount)
        raw = self.quote_raw(asset_in, asset_out, amount)
        optimal = self.assembler.present(raw, direct) if self.presentation_enabled else raw
        return RouteQuotes(direct=direct, raw=raw, optimal=optimal)


def create_default_engine(settings=None) -> QuoteEngine:
    """Create an engine with the default tables and the given settings."""
    if settings is None:
        from polyroute.config import get_settings

        settings = get_settings()

    return QuoteEngine(
        direct_workers=settings.direct_workers,
        presentation_enabled=settings.presentation_enabled,
        presentation_margin=Decimal(str(settings.presentation_margin)),
        presentation_max_bonus=Decimal(str(settings.presentation_max_bonus)),
    )
