"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from polyroute import __version__
from polyroute.config import get_settings


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="PolyRoute API",
        description="Multi-venue swap quoting and path selection",
        version=__version__,
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    from polyroute.api.routes import health
    from polyroute.web.controllers import quotes_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(quotes_router)

    return app


# Default app instance
app = create_app()
