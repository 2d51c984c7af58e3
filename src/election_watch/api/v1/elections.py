"""Election API endpoints: elections list, voter info, and representatives.

No authentication required. All data comes from the civic-data provider
on every request; nothing is cached or persisted.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from election_watch.api.errors import MissingParameterError
from election_watch.core.dependencies import get_civic_client
from election_watch.lib.civic import GoogleCivicClient
from election_watch.lib.civic.records import GeoPoint
from election_watch.schemas.election import ElectionListResponse, RepresentativesResponse, VoterInfoResponse
from election_watch.services import election_service

elections_router = APIRouter(prefix="/elections", tags=["elections"])


def require_address(
    address: str | None = Query(  # noqa: B008
        None,
        max_length=500,
        description="Freeform street address to resolve",
    ),
) -> str:
    """Validate the ``address`` query parameter before any provider work."""
    if address is None or not address.strip():
        raise MissingParameterError("address")
    return address.strip()


@elections_router.get(
    "",
    response_model=ElectionListResponse,
    response_model_exclude_none=True,
)
async def list_elections(
    client: GoogleCivicClient = Depends(get_civic_client),  # noqa: B008
) -> ElectionListResponse:
    """List elections currently available from the provider."""
    elections = await election_service.list_elections(client)
    return ElectionListResponse(data=elections)


@elections_router.get(
    "/voter-info",
    response_model=VoterInfoResponse,
    response_model_exclude_none=True,
)
async def get_voter_info(
    address: str = Depends(require_address),  # noqa: B008
    election_id: str | None = Query(  # noqa: B008
        None,
        alias="electionId",
        max_length=64,
        description="Provider election id; defaults to the upcoming election for the address",
    ),
    lat: float | None = Query(None, ge=-90, le=90, description="Caller latitude for distance annotation"),  # noqa: B008
    lng: float | None = Query(  # noqa: B008
        None, ge=-180, le=180, description="Caller longitude for distance annotation"
    ),
    client: GoogleCivicClient = Depends(get_civic_client),  # noqa: B008
) -> VoterInfoResponse:
    """Resolve an address to its election, contests, and polling locations.

    When both ``lat`` and ``lng`` are supplied, locations with coordinates
    are annotated with their distance from that point. Provider ordering is
    preserved.
    """
    if (lat is None) != (lng is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Both lat and lng are required for distance annotation",
        )
    origin = GeoPoint(lat=lat, lng=lng) if lat is not None and lng is not None else None

    result = await election_service.resolve_voter_info(client, address, election_id or None, origin=origin)
    return VoterInfoResponse(data=result)


@elections_router.get(
    "/representatives",
    response_model=RepresentativesResponse,
)
async def get_representatives(
    address: str = Depends(require_address),  # noqa: B008
    levels: str | None = Query(None, description="Comma-separated office levels"),  # noqa: B008
    roles: str | None = Query(None, description="Comma-separated office roles"),  # noqa: B008
    client: GoogleCivicClient = Depends(get_civic_client),  # noqa: B008
) -> RepresentativesResponse:
    """Look up representatives for an address (provider payload as-is)."""
    representatives = await election_service.lookup_representatives(
        client,
        address,
        levels=election_service.parse_csv_filter(levels),
        roles=election_service.parse_csv_filter(roles),
    )
    return RepresentativesResponse(data=representatives)
