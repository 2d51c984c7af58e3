"""Provider-shaped Pydantic models for Google Civic Information API payloads.

These mirror the provider's JSON documents as received; interpretation of
the fields belongs to :mod:`election_watch.lib.civic.normalizer`.

Field names use camelCase to match the provider JSON structure. Unknown
keys are ignored and explicit JSON ``null`` collections are coerced to
empty lists.
"""

# ruff: noqa: N815

from typing import Any

from pydantic import BaseModel, Field, field_validator


def _coerce_null_to_list(v: Any) -> Any:
    """Coerce explicit JSON null to empty list."""
    return v if v is not None else []


class CivicSource(BaseModel):
    """Attribution for a provider record."""

    name: str | None = None
    official: bool | None = None


class CivicElection(BaseModel):
    """An election as listed by the provider."""

    id: str
    name: str
    electionDay: str
    ocdDivisionId: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> Any:
        # The provider documents ids as int64 serialized to strings
        return str(v) if isinstance(v, int) else v


class CivicAddress(BaseModel):
    """A simple postal address as the provider formats it."""

    locationName: str | None = None
    line1: str | None = None
    line2: str | None = None
    line3: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None


class CivicChannel(BaseModel):
    """A candidate's social-media presence."""

    type: str
    id: str


class CivicCandidate(BaseModel):
    """A candidate on the ballot."""

    name: str
    party: str | None = None
    candidateUrl: str | None = None
    email: str | None = None
    phone: str | None = None
    photoUrl: str | None = None
    orderOnBallot: int | None = None
    channels: list[CivicChannel] | None = None


class CivicDistrict(BaseModel):
    """The electoral district a contest applies to."""

    name: str | None = None
    scope: str | None = None
    id: str | None = None


class CivicContest(BaseModel):
    """A contest (candidate race or referendum) on the ballot."""

    type: str | None = None
    office: str | None = None
    level: list[str] | None = None
    roles: list[str] | None = None
    district: CivicDistrict | None = None
    ballotTitle: str | None = None
    ballotPlacement: int | None = None
    referendumTitle: str | None = None
    referendumSubtitle: str | None = None
    referendumUrl: str | None = None
    referendumText: str | None = None
    numberElected: int | None = None
    numberVotingFor: int | None = None
    candidates: list[CivicCandidate] = Field(default_factory=list)
    sources: list[CivicSource] = Field(default_factory=list)

    @field_validator("candidates", "sources", mode="before")
    @classmethod
    def _coerce_lists(cls, v: Any) -> Any:
        return _coerce_null_to_list(v)


class CivicPollingLocation(BaseModel):
    """A polling place, early vote site, or drop-off location."""

    name: str | None = None
    address: CivicAddress = Field(default_factory=CivicAddress)
    pollingHours: str | None = None
    notes: str | None = None
    startDate: str | None = None
    endDate: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    sources: list[CivicSource] = Field(default_factory=list)

    @field_validator("address", mode="before")
    @classmethod
    def _coerce_address(cls, v: Any) -> Any:
        return v if v is not None else {}

    @field_validator("sources", mode="before")
    @classmethod
    def _coerce_sources(cls, v: Any) -> Any:
        return _coerce_null_to_list(v)


class CivicAdministrationBody(BaseModel):
    """Information about an election administrative body."""

    name: str | None = None
    electionInfoUrl: str | None = None
    electionRegistrationUrl: str | None = None
    electionRegistrationConfirmationUrl: str | None = None
    absenteeVotingInfoUrl: str | None = None
    votingLocationFinderUrl: str | None = None
    ballotInfoUrl: str | None = None
    electionRulesUrl: str | None = None
    correspondenceAddress: dict[str, Any] | None = None


class CivicAdministrativeRegion(BaseModel):
    """State-level election administration information."""

    name: str | None = None
    electionAdministrationBody: CivicAdministrationBody | None = None
    sources: list[CivicSource] = Field(default_factory=list)

    @field_validator("sources", mode="before")
    @classmethod
    def _coerce_sources(cls, v: Any) -> Any:
        return _coerce_null_to_list(v)


class VoterInfoPayload(BaseModel):
    """Top-level ``voterinfo`` response document."""

    election: CivicElection | None = None
    normalizedInput: CivicAddress | None = None
    mailOnly: bool | None = None
    contests: list[CivicContest] = Field(default_factory=list)
    pollingLocations: list[CivicPollingLocation] = Field(default_factory=list)
    earlyVoteSites: list[CivicPollingLocation] = Field(default_factory=list)
    dropOffLocations: list[CivicPollingLocation] = Field(default_factory=list)
    state: list[CivicAdministrativeRegion] = Field(default_factory=list)

    @field_validator(
        "contests",
        "pollingLocations",
        "earlyVoteSites",
        "dropOffLocations",
        "state",
        mode="before",
    )
    @classmethod
    def _coerce_lists(cls, v: Any) -> Any:
        return _coerce_null_to_list(v)


class ElectionsPayload(BaseModel):
    """Top-level ``elections`` response document."""

    elections: list[CivicElection] = Field(default_factory=list)

    @field_validator("elections", mode="before")
    @classmethod
    def _coerce_elections(cls, v: Any) -> Any:
        return _coerce_null_to_list(v)


def parse_voter_info(raw_json: dict) -> VoterInfoPayload:
    """Parse and validate a raw ``voterinfo`` document.

    Raises:
        pydantic.ValidationError: If the JSON structure is invalid.
    """
    return VoterInfoPayload.model_validate(raw_json)


def parse_elections(raw_json: dict) -> ElectionsPayload:
    """Parse and validate a raw ``elections`` document.

    Raises:
        pydantic.ValidationError: If the JSON structure is invalid.
    """
    return ElectionsPayload.model_validate(raw_json)
