"""Quote API endpoints."""

from fastapi import APIRouter

from polyroute.web.contracts.quotes import (
    DirectQuoteResponse,
    RouteQuoteRequest,
    RouteQuoteResponse,
)
from polyroute.web.services.quote_service import QuoteService

router = APIRouter(prefix="/quotes", tags=["quotes"])

# Service instance
_quote_service = QuoteService()


@router.post("/", response_model=RouteQuoteResponse)
async def get_quote(request: RouteQuoteRequest) -> RouteQuoteResponse:
    """Get the direct quote and the 3-hop multi-venue quote.

    This is a READ-ONLY operation - no trades are executed.
    """
    return await _quote_service.get_quote(request)


@router.post("/direct", response_model=DirectQuoteResponse)
async def get_direct_quote(request: RouteQuoteRequest) -> DirectQuoteResponse:
    """Get the best single-venue quote and every venue's hop."""
    return await _quote_service.get_direct_quote(request)


@router.get("/assets")
async def get_supported_assets() -> dict:
    """Get the asset catalog."""
    assets = _quote_service.get_supported_assets()
    return {
        "success": True,
        "assets": assets,
        "total": len(assets),
    }


@router.get("/venues")
async def get_venues() -> dict:
    """Get venues with their base fee factors."""
    venues = _quote_service.get_venues()
    return {
        "success": True,
        "venues": [venue.model_dump(mode="json") for venue in venues],
        "total": len(venues),
    }
