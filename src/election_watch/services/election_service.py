"""Election service: address resolution over the civic-data provider.

Orchestrates one provider call per operation and hands the payload to the
normalization layer. Provider failures propagate to the API boundary
unchanged; this layer does not log them.
"""

from typing import Any

from pydantic import ValidationError

from election_watch.lib.civic import GoogleCivicClient, normalize_elections, normalize_voter_info
from election_watch.lib.civic.client import PROVIDER_NAME
from election_watch.lib.civic.errors import MalformedResponseError
from election_watch.lib.civic.records import Address, ElectionList, GeoPoint, PollingLocation, VoterInfoResult
from election_watch.lib.geo import directions_url, format_distance, haversine_miles


def parse_csv_filter(value: str | None) -> list[str] | None:
    """Split a comma-separated query value, dropping blank entries.

    Returns:
        The list of values, or None when nothing remains.
    """
    if value is None:
        return None
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or None


async def list_elections(client: GoogleCivicClient) -> ElectionList:
    """List elections available from the provider."""
    payload = await client.get_elections()
    return normalize_elections(payload)


async def resolve_voter_info(
    client: GoogleCivicClient,
    address: str | Address,
    election_id: str | None = None,
    origin: GeoPoint | None = None,
) -> VoterInfoResult:
    """Resolve an address to its election, contests, and polling locations.

    Args:
        client: Provider client.
        address: Free-text or structured address.
        election_id: Optional provider election id.
        origin: Optional caller location used to annotate distances.

    Returns:
        The normalized result, in provider order.

    Raises:
        CivicProviderError: If the provider call fails or its payload
            cannot be normalized.
    """
    payload = await client.get_voter_info(address, election_id)
    try:
        result = normalize_voter_info(payload)
    except ValidationError as exc:
        raise MalformedResponseError(PROVIDER_NAME, "Google Civic API returned an invalid response") from exc
    return annotate_locations(result, origin)


def annotate_locations(result: VoterInfoResult, origin: GeoPoint | None = None) -> VoterInfoResult:
    """Attach directions links, and distances from ``origin`` when given.

    Locations without coordinates are returned unchanged. Ordering is
    never altered.
    """

    def _annotate(locations: list[PollingLocation]) -> list[PollingLocation]:
        annotated = []
        for location in locations:
            if location.coordinates is None:
                annotated.append(location)
                continue
            update: dict[str, Any] = {"directions_url": directions_url(location.coordinates)}
            if origin is not None:
                miles = haversine_miles(origin, location.coordinates)
                update["distance_miles"] = round(miles, 2)
                update["distance_label"] = format_distance(miles)
            annotated.append(location.model_copy(update=update))
        return annotated

    return result.model_copy(
        update={
            "polling_locations": _annotate(result.polling_locations),
            "early_vote_sites": _annotate(result.early_vote_sites),
            "drop_off_locations": _annotate(result.drop_off_locations),
        }
    )


async def lookup_representatives(
    client: GoogleCivicClient,
    address: str | Address,
    levels: list[str] | None = None,
    roles: list[str] | None = None,
) -> dict[str, Any]:
    """Look up representatives for an address; the payload is passed through."""
    return await client.get_representatives(address, levels=levels, roles=roles)
