"""Pydantic v2 response schemas for the election endpoints."""

from typing import Any

from election_watch.lib.civic.records import ElectionList, VoterInfoResult
from election_watch.schemas.common import SuccessEnvelope


class ElectionListResponse(SuccessEnvelope[ElectionList]):
    """Response for GET /elections."""


class VoterInfoResponse(SuccessEnvelope[VoterInfoResult]):
    """Response for GET /elections/voter-info."""


class RepresentativesResponse(SuccessEnvelope[dict[str, Any]]):
    """Response for GET /elections/representatives (provider payload as-is)."""
