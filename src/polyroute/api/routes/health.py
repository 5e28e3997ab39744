"""Health check endpoints."""

from fastapi import APIRouter

from polyroute import __version__
from polyroute.config import get_settings
from polyroute.routing.fees import DEFAULT_VENUES
from polyroute.routing.paths import CURATED_ROUTES
from polyroute.routing.rates import DEFAULT_RATES, RateTable

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "polyroute"}


@router.get("/health/detailed")
async def detailed_health():
    """Detailed health check with configuration and routing table sizes."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "polyroute",
        "version": __version__,
        "config": settings.get_safe_dict(),
        "tables": {
            "assets": len(RateTable().assets),
            "rates": len(DEFAULT_RATES),
            "venues": len(DEFAULT_VENUES),
            "curated_routes": len(CURATED_ROUTES),
        },
    }
