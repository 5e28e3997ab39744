"""Quote request and response contracts."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class RouteQuoteRequest(BaseModel):
    """Request for a swap quote."""

    from_asset: str = Field(..., min_length=1, description="Source asset symbol (e.g., USDC, POL)")
    to_asset: str = Field(..., min_length=1, description="Destination asset symbol")
    amount: Decimal = Field(..., gt=0, allow_inf_nan=False, description="Amount to swap")
    apply_presentation: bool = Field(
        default=True,
        description="Reconcile the multi-hop route against the direct quote for display",
    )


class SwapStepModel(BaseModel):
    """One hop of a quoted route."""

    venue: str
    token_in: str
    amount_in: Decimal
    token_out: str
    amount_out: Decimal


class QuoteModel(BaseModel):
    """A priced route."""

    category: str = Field(..., description="direct, same_asset, curated or fallback")
    steps: list[SwapStepModel] = Field(default_factory=list)
    estimated_output: Decimal = Field(..., description="Output of the final step")
    gas_estimate: Decimal = Field(..., description="Estimated gas for the whole route, in POL")
    is_complete: bool = Field(..., description="False if a hop had no liquidity")
    is_presented: bool = Field(False, description="Output includes the display adjustment")
    raw_output: Optional[Decimal] = Field(None, description="Computed output before adjustment")
    adjustment: Optional[Decimal] = Field(None, description="Display adjustment factor")


class DirectQuoteResponse(BaseModel):
    """Response containing the best single-venue quote."""

    success: bool = Field(..., description="Whether a direct route exists")
    from_asset: str
    to_asset: str
    from_amount: Decimal
    direct: Optional[QuoteModel] = None
    venues: list[SwapStepModel] = Field(
        default_factory=list, description="Every venue's hop, in comparison order"
    )
    error: Optional[str] = None


class RouteQuoteResponse(BaseModel):
    """Response containing direct and multi-hop quotes."""

    success: bool = Field(..., description="Whether a complete route was found")
    from_asset: str
    to_asset: str
    from_amount: Decimal
    direct: Optional[QuoteModel] = None
    optimal: Optional[QuoteModel] = None
    error: Optional[str] = Field(None, description="Error message if failed")


class VenueInfo(BaseModel):
    """Venue listing entry."""

    name: str
    kind: str
    fee_factor: Decimal
    stable_fee_factor: Optional[Decimal] = None
    direct: bool = Field(..., description="Compared for direct routes")
