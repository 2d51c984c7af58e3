"""FastAPI dependency injection for the civic-data provider client.

The client is built once per process in the application lifespan and
stored on ``app.state``; routes receive it through :func:`get_civic_client`
so tests can substitute a fake with ``app.dependency_overrides``.
"""

from fastapi import Request

from election_watch.core.config import Settings
from election_watch.lib.civic import GoogleCivicClient
from election_watch.lib.civic.client import PROVIDER_NAME
from election_watch.lib.civic.errors import ProviderConfigurationError


def build_civic_client(settings: Settings) -> GoogleCivicClient:
    """Construct the provider client, validating its credential eagerly.

    Raises:
        ProviderConfigurationError: If the API key is not configured.
    """
    return GoogleCivicClient(
        api_key=settings.google_civic_api_key,
        base_url=settings.google_civic_base_url,
    )


def get_civic_client(request: Request) -> GoogleCivicClient:
    """Return the process-wide provider client.

    Raises:
        ProviderConfigurationError: If the client could not be built at startup.
    """
    client: GoogleCivicClient | None = getattr(request.app.state, "civic_client", None)
    if client is None:
        raise ProviderConfigurationError(PROVIDER_NAME, "Google Civic API client is not configured")
    return client
