"""Quote service for direct and multi-hop swap quotes.

Quotes come from static tables; nothing here executes a trade.
"""

import logging
from decimal import Decimal
from typing import Optional

from polyroute.config import Settings, get_settings
from polyroute.routing.base import PresentedQuote, Quote, SwapStep, quantize
from polyroute.routing.direct import DIRECT_VENUES
from polyroute.routing.engine import QuoteEngine, create_default_engine, normalize_symbol
from polyroute.web.contracts.quotes import (
    DirectQuoteResponse,
    QuoteModel,
    RouteQuoteRequest,
    RouteQuoteResponse,
    SwapStepModel,
    VenueInfo,
)

logger = logging.getLogger(__name__)


class QuoteService:
    """Maps quote requests onto the engine and engine results onto responses."""

    def __init__(self, engine: Optional[QuoteEngine] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.engine = engine or create_default_engine(self.settings)

    async def get_quote(self, request: RouteQuoteRequest) -> RouteQuoteResponse:
        """Get the direct quote and the multi-hop quote.

        Args:
            request: Quote request parameters

        Returns:
            RouteQuoteResponse with both quotes
        """
        from_asset = normalize_symbol(request.from_asset)
        to_asset = normalize_symbol(request.to_asset)

        try:
            quotes = self.engine.quote_route(from_asset, to_asset, request.amount)
            direct = quotes.direct
            optimal = quotes.optimal if request.apply_presentation else quotes.raw

            if not optimal.is_complete:
                error = f"No route available for {from_asset}/{to_asset}"
            else:
                error = self._dust_error(optimal)

            return RouteQuoteResponse(
                success=error is None,
                from_asset=from_asset,
                to_asset=to_asset,
                from_amount=request.amount,
                direct=self._quote_model(direct) if direct else None,
                optimal=self._quote_model(optimal),
                error=error,
            )

        except Exception as e:
            logger.error(f"Failed to get quote: {e}")
            return RouteQuoteResponse(
                success=False,
                from_asset=from_asset,
                to_asset=to_asset,
                from_amount=request.amount,
                error=str(e),
            )

    async def get_direct_quote(self, request: RouteQuoteRequest) -> DirectQuoteResponse:
        """Get the best single-venue quote along with every venue's hop."""
        from_asset = normalize_symbol(request.from_asset)
        to_asset = normalize_symbol(request.to_asset)

        try:
            steps = self.engine.direct.all_direct(from_asset, to_asset, request.amount)
            direct = self.engine.quote_direct(from_asset, to_asset, request.amount)

            if direct is None:
                error = f"No direct route for {from_asset}/{to_asset}"
            else:
                error = self._dust_error(direct)

            return DirectQuoteResponse(
                success=error is None,
                from_asset=from_asset,
                to_asset=to_asset,
                from_amount=request.amount,
                direct=self._quote_model(direct) if direct else None,
                venues=[self._step_model(step) for step in steps],
                error=error,
            )

        except Exception as e:
            logger.error(f"Failed to get direct quote: {e}")
            return DirectQuoteResponse(
                success=False,
                from_asset=from_asset,
                to_asset=to_asset,
                from_amount=request.amount,
                error=str(e),
            )

    def get_supported_assets(self) -> list[str]:
        """Assets with at least one listed rate."""
        return self.engine.rates.assets

    def get_venues(self) -> list[VenueInfo]:
        """Venues known to the fee model."""
        return [
            VenueInfo(
                name=profile.name,
                kind=profile.kind.value,
                fee_factor=profile.fee_factor,
                stable_fee_factor=profile.stable_fee_factor,
                direct=profile.name in DIRECT_VENUES,
            )
            for profile in self.engine.fees.venues
        ]

    def _dust_error(self, quote: Quote) -> Optional[str]:
        """Error for a positive output that shows as zero at quote precision."""
        precision = self.settings.quote_precision
        if quote.rounded_output(precision) > 0:
            return None
        return (
            f"Output for {quote.from_asset}/{quote.to_asset} rounds to zero "
            f"at {precision} decimal places"
        )

    def _step_model(self, step: SwapStep) -> SwapStepModel:
        precision = self.settings.quote_precision
        return SwapStepModel(
            venue=step.venue,
            token_in=step.token_in,
            amount_in=quantize(step.amount_in, precision),
            token_out=step.token_out,
            amount_out=quantize(step.amount_out, precision),
        )

    def _quote_model(self, quote: Quote) -> QuoteModel:
        precision = self.settings.quote_precision
        raw_output: Optional[Decimal] = None
        adjustment: Optional[Decimal] = None
        if isinstance(quote, PresentedQuote):
            raw_output = quantize(quote.raw_output, precision)
            adjustment = quantize(quote.adjustment, precision)

        return QuoteModel(
            category=quote.category.value,
            steps=[self._step_model(step) for step in quote.steps],
            estimated_output=quote.rounded_output(precision),
            gas_estimate=quantize(quote.gas_estimate, self.settings.gas_precision),
            is_complete=quote.is_complete,
            is_presented=quote.is_presented,
            raw_output=raw_output,
            adjustment=adjustment,
        )
