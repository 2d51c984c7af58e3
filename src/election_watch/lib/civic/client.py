"""Google Civic Information API client.

Uses the Google Civic Information API
(https://developers.google.com/civic-information) to list elections,
resolve an address to its ballot and polling places, and look up
representatives. Requires an API key.

Each call makes exactly one outbound request: no retries, no caching,
and httpx's default timeout.
"""

import json
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from election_watch.lib.civic.errors import (
    MalformedResponseError,
    ProviderConfigurationError,
    ProviderUnavailableError,
)
from election_watch.lib.civic.payload import ElectionsPayload, VoterInfoPayload, parse_elections, parse_voter_info
from election_watch.lib.civic.records import Address
from election_watch.lib.geo.location import format_address

GOOGLE_CIVIC_BASE_URL = "https://www.googleapis.com/civicinfo/v2"
PROVIDER_NAME = "google_civic"


class GoogleCivicClient:
    """Async client for the Google Civic Information API.

    Args:
        api_key: Google Civic Information API key.
        base_url: API base URL.
        http_client: Optional pre-built httpx client (tests inject one).

    Raises:
        ProviderConfigurationError: If ``api_key`` is empty.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = GOOGLE_CIVIC_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key:
            raise ProviderConfigurationError(
                PROVIDER_NAME,
                "GOOGLE_CIVIC_API_KEY environment variable is not set",
            )
        self._api_key = api_key
        self._client = http_client or httpx.AsyncClient(base_url=base_url)

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    async def get_elections(self) -> ElectionsPayload:
        """List elections the provider currently knows about.

        Returns:
            Provider-shaped elections payload.

        Raises:
            ProviderUnavailableError: On transport errors or non-2xx responses.
            MalformedResponseError: If the payload cannot be decoded.
        """
        data = await self._request("/elections", {})
        try:
            return parse_elections(data)
        except ValidationError as exc:
            raise MalformedResponseError(PROVIDER_NAME, "Google Civic API returned an invalid response") from exc

    async def get_voter_info(self, address: str | Address, election_id: str | None = None) -> VoterInfoPayload:
        """Resolve an address to its election, contests, and polling places.

        Args:
            address: Free-text address or a structured :class:`Address`.
            election_id: Optional provider election id. When omitted the
                provider picks the upcoming election for the address.

        Returns:
            Provider-shaped voter information payload.

        Raises:
            ValueError: If the address is empty.
            ProviderUnavailableError: On transport errors or non-2xx responses.
            MalformedResponseError: If the payload cannot be decoded.
        """
        params = {"address": _address_param(address)}
        if election_id:
            params["electionId"] = election_id

        data = await self._request("/voterinfo", params)
        try:
            return parse_voter_info(data)
        except ValidationError as exc:
            raise MalformedResponseError(PROVIDER_NAME, "Google Civic API returned an invalid response") from exc

    async def get_representatives(
        self,
        address: str | Address,
        levels: list[str] | None = None,
        roles: list[str] | None = None,
    ) -> dict[str, Any]:
        """Look up representatives for an address.

        The payload is returned as decoded JSON without normalization.

        Args:
            address: Free-text address or a structured :class:`Address`.
            levels: Optional office levels to filter by.
            roles: Optional office roles to filter by.

        Returns:
            Raw decoded JSON document.

        Raises:
            ValueError: If the address is empty.
            ProviderUnavailableError: On transport errors or non-2xx responses.
            MalformedResponseError: If the payload cannot be decoded.
        """
        params = {"address": _address_param(address)}
        if levels:
            params["levels"] = ",".join(levels)
        if roles:
            params["roles"] = ",".join(roles)
        return await self._request("/representatives", params)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _request(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        """Make one authenticated GET request and decode the JSON object."""
        logger.debug("Google Civic request to {}", path)
        try:
            response = await self._client.get(path, params={"key": self._api_key, **params})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ProviderUnavailableError(
                PROVIDER_NAME,
                f"Google Civic API error: {exc.response.status_code} {exc.response.reason_phrase}",
                status_code=exc.response.status_code,
                body=exc.response.text,
            ) from exc
        except httpx.RequestError as exc:
            raise ProviderUnavailableError(
                PROVIDER_NAME,
                f"Google Civic API request failed: {type(exc).__name__}",
            ) from exc

        try:
            result = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedResponseError(
                PROVIDER_NAME,
                "Google Civic API returned an invalid response",
                status_code=response.status_code,
            ) from exc

        if not isinstance(result, dict):
            raise MalformedResponseError(
                PROVIDER_NAME,
                "Google Civic API returned an invalid response",
                status_code=response.status_code,
            )
        return result


def _address_param(address: str | Address) -> str:
    """Render an address for the ``address`` query parameter."""
    value = format_address(address) if isinstance(address, Address) else address
    value = value.strip()
    if not value:
        msg = "address must not be empty"
        raise ValueError(msg)
    return value
