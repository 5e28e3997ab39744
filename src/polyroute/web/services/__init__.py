"""Web services wrapping the routing engine."""

from polyroute.web.services.quote_service import QuoteService

__all__ = [
    "QuoteService",
]
