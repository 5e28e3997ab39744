"""Request and response contracts for the web layer.

These Pydantic models define the API interface for web clients.
"""

from polyroute.web.contracts.quotes import (
    DirectQuoteResponse,
    QuoteModel,
    RouteQuoteRequest,
    RouteQuoteResponse,
    SwapStepModel,
    VenueInfo,
)

__all__ = [
    "DirectQuoteResponse",
    "QuoteModel",
    "RouteQuoteRequest",
    "RouteQuoteResponse",
    "SwapStepModel",
    "VenueInfo",
]
