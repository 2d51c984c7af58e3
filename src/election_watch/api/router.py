"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from election_watch.api.middleware import RateLimitMiddleware, SecurityHeadersMiddleware, setup_cors
from election_watch.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from election_watch.api.v1.elections import elections_router
    from election_watch.api.v1.health import api_index

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.add_api_route("", api_index, methods=["GET"], tags=["health"])
    root_router.include_router(elections_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        requests_per_minute=settings.rate_limit_per_minute,
        trusted_proxy_headers=settings.trusted_proxy_header_list,
    )
