"""Health check and API index endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter

from election_watch import __version__

health_router = APIRouter(tags=["health"])


@health_router.get("/health")
async def health() -> dict[str, str]:
    """Liveness check. Does not contact the civic-data provider."""
    return {"status": "ok", "timestamp": datetime.now(UTC).isoformat()}


async def api_index() -> dict[str, str]:
    """Describe the API version."""
    return {"message": "Election Watch API v1", "version": __version__}
