"""Routing module for swap quoting and path selection.

Components:
- RateTable: static bidirectional exchange rates
- VenueFeeModel: per-venue fee factors, stable-pool overrides
- SwapCalculator: single-hop pricing
- DirectRouteSelector: best single-venue hop
- PathSynthesizer: 3-hop plans (same-asset, curated, fallback)
- QuoteAssembler: prices plans, applies the presentation adjustment
- QuoteEngine: quote_direct / quote_optimal entry points
"""

from polyroute.routing.assembler import QuoteAssembler
from polyroute.routing.base import (
    PathCategory,
    PresentedQuote,
    Quote,
    RouteHop,
    RoutePath,
    RouteQuotes,
    SwapStep,
)
from polyroute.routing.calculator import SwapCalculator
from polyroute.routing.direct import DIRECT_VENUES, DirectRouteSelector
from polyroute.routing.engine import QuoteEngine, create_default_engine
from polyroute.routing.fees import VenueFeeModel, VenueKind, VenueProfile
from polyroute.routing.paths import CURATED_ROUTES, PathSynthesizer
from polyroute.routing.rates import FALLBACK_RATE, RateTable

__all__ = [
    # Data types
    "PathCategory",
    "PresentedQuote",
    "Quote",
    "RouteHop",
    "RoutePath",
    "RouteQuotes",
    "SwapStep",
    # Tables
    "RateTable",
    "FALLBACK_RATE",
    "VenueFeeModel",
    "VenueKind",
    "VenueProfile",
    "CURATED_ROUTES",
    "DIRECT_VENUES",
    # Components
    "SwapCalculator",
    "DirectRouteSelector",
    "PathSynthesizer",
    "QuoteAssembler",
    # Engine
    "QuoteEngine",
    "create_default_engine",
]
