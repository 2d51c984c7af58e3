"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from election_watch import __version__
from election_watch.core.config import get_settings
from election_watch.core.dependencies import build_civic_client
from election_watch.core.logging import setup_logging
from election_watch.lib.civic.errors import ProviderConfigurationError


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifecycle: build and close the provider client."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)

    try:
        app.state.civic_client = build_civic_client(settings)
    except ProviderConfigurationError as e:
        # Reported once here; election endpoints answer 500 until fixed
        logger.critical("Civic data provider disabled: {}", e.message)
        app.state.civic_client = None

    yield

    if app.state.civic_client is not None:
        await app.state.civic_client.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Election Watch API",
        description="Upcoming elections, ballot contests, candidates, and polling places for an address",
        version=__version__,
        lifespan=lifespan,
    )

    from election_watch.api.errors import register_exception_handlers
    from election_watch.api.router import create_router, setup_middleware
    from election_watch.api.v1.health import health_router

    register_exception_handlers(app)
    setup_middleware(app, settings)
    app.include_router(health_router)
    app.include_router(create_router(settings))

    return app
