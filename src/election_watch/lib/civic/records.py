"""Normalized domain records produced from civic-provider payloads.

Records are immutable. Attributes are snake_case in Python and serialize to
camelCase JSON keys. Optional values the provider omitted stay ``None``;
collections are always present, possibly empty, in provider order.
"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DomainRecord(BaseModel):
    """Base for immutable, camelCase-serialized domain records."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class LocationType(StrEnum):
    """Which provider collection a polling-like location came from."""

    POLLING_PLACE = "polling_place"
    EARLY_VOTING = "early_voting"
    DROP_OFF = "drop_off"


class GeoPoint(DomainRecord):
    """A WGS84 coordinate pair in degrees."""

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class Address(DomainRecord):
    """A structured postal address supplied by (or echoed back to) a caller."""

    street: str
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None


class Source(DomainRecord):
    """Provenance attribution for a record."""

    name: str | None = None
    official: bool | None = None


class ElectionSummary(DomainRecord):
    """An election as identified by the provider."""

    id: str
    name: str
    election_day: str
    ocd_division_id: str | None = None


class ElectionList(DomainRecord):
    """The provider's list of available elections."""

    elections: list[ElectionSummary] = Field(default_factory=list)


class SocialChannel(DomainRecord):
    """A social-media channel, preserved exactly as the provider tagged it."""

    type: str
    id: str


class CandidateSummary(DomainRecord):
    """A candidate in a contest. Only ``name`` is guaranteed."""

    name: str
    party: str | None = None
    website_url: str | None = None
    email: str | None = None
    phone: str | None = None
    photo_url: str | None = None
    order_on_ballot: int | None = None
    social_channels: list[SocialChannel] | None = None


class District(DomainRecord):
    """The electoral district a contest applies to."""

    name: str | None = None
    scope: str | None = None
    id: str | None = None


class Contest(DomainRecord):
    """A single race or referendum on the ballot."""

    type: str | None = None
    office_name: str | None = None
    level: list[str] | None = None
    roles: list[str] | None = None
    district: District | None = None
    ballot_title: str | None = None
    ballot_placement: int | None = None
    referendum_title: str | None = None
    referendum_subtitle: str | None = None
    referendum_url: str | None = None
    referendum_text: str | None = None
    number_elected: int | None = None
    number_voting_for: int | None = None
    candidates: list[CandidateSummary] = Field(default_factory=list)
    sources: list[Source] = Field(default_factory=list)


class PollingLocation(DomainRecord):
    """A polling place, early-voting site, or drop-off location."""

    location_type: LocationType | None = None
    name: str | None = None
    address_lines: list[str] = Field(default_factory=list)
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    hours: str | None = None
    coordinates: GeoPoint | None = None
    notes: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    sources: list[Source] = Field(default_factory=list)

    # Filled by the service layer when the caller supplies an origin point
    distance_miles: float | None = None
    distance_label: str | None = None
    directions_url: str | None = None


class AdministrationBody(DomainRecord):
    """A state's election administration office and its resource links."""

    name: str | None = None
    election_info_url: str | None = None
    election_registration_url: str | None = None
    election_registration_confirmation_url: str | None = None
    absentee_voting_info_url: str | None = None
    voting_location_finder_url: str | None = None
    ballot_info_url: str | None = None
    election_rules_url: str | None = None
    correspondence_address: dict[str, Any] | None = None


class StateResources(DomainRecord):
    """State-level election administration resources."""

    name: str | None = None
    election_administration_body: AdministrationBody | None = None
    sources: list[Source] = Field(default_factory=list)


class VoterInfoResult(DomainRecord):
    """Everything the provider resolved for one address.

    A missing ``election`` means the provider found no applicable election
    for the address, which is a valid outcome.
    """

    election: ElectionSummary | None = None
    normalized_input: Address | None = None
    mail_only: bool | None = None
    contests: list[Contest] = Field(default_factory=list)
    polling_locations: list[PollingLocation] = Field(default_factory=list)
    early_vote_sites: list[PollingLocation] = Field(default_factory=list)
    drop_off_locations: list[PollingLocation] = Field(default_factory=list)
    state_resources: StateResources | None = None
