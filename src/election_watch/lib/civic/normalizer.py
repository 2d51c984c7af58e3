"""Normalize provider-shaped civic payloads into domain records.

Pure transformations with no I/O. This is the only place that interprets
provider field names; everything downstream works with
:mod:`election_watch.lib.civic.records`.
"""

from election_watch.lib.civic.payload import (
    CivicAddress,
    CivicAdministrativeRegion,
    CivicCandidate,
    CivicContest,
    CivicElection,
    CivicPollingLocation,
    CivicSource,
    ElectionsPayload,
    VoterInfoPayload,
)
from election_watch.lib.civic.records import (
    AdministrationBody,
    Address,
    CandidateSummary,
    Contest,
    District,
    ElectionList,
    ElectionSummary,
    GeoPoint,
    LocationType,
    PollingLocation,
    SocialChannel,
    Source,
    StateResources,
    VoterInfoResult,
)


def normalize_sources(sources: list[CivicSource]) -> list[Source]:
    """Carry provider attribution over unchanged."""
    return [Source(name=s.name, official=s.official) for s in sources]


def normalize_election(election: CivicElection) -> ElectionSummary:
    """Map a provider election to an :class:`ElectionSummary`."""
    return ElectionSummary(
        id=election.id,
        name=election.name,
        election_day=election.electionDay,
        ocd_division_id=election.ocdDivisionId,
    )


def normalize_elections(payload: ElectionsPayload) -> ElectionList:
    """Map the provider's election list, preserving its order."""
    return ElectionList(elections=[normalize_election(e) for e in payload.elections])


def normalize_candidate(candidate: CivicCandidate) -> CandidateSummary:
    """Map a provider candidate.

    Channels are copied as-is; no attempt is made to map channel types
    onto a fixed set of networks.
    """
    channels = None
    if candidate.channels is not None:
        channels = [SocialChannel(type=c.type, id=c.id) for c in candidate.channels]

    return CandidateSummary(
        name=candidate.name,
        party=candidate.party,
        website_url=candidate.candidateUrl,
        email=candidate.email,
        phone=candidate.phone,
        photo_url=candidate.photoUrl,
        order_on_ballot=candidate.orderOnBallot,
        social_channels=channels,
    )


def normalize_contest(contest: CivicContest) -> Contest:
    """Map a provider contest, including uncontested and referendum contests."""
    district = None
    if contest.district is not None:
        district = District(
            name=contest.district.name,
            scope=contest.district.scope,
            id=contest.district.id,
        )

    return Contest(
        type=contest.type,
        office_name=contest.office,
        level=list(contest.level) if contest.level is not None else None,
        roles=list(contest.roles) if contest.roles is not None else None,
        district=district,
        ballot_title=contest.ballotTitle,
        ballot_placement=contest.ballotPlacement,
        referendum_title=contest.referendumTitle,
        referendum_subtitle=contest.referendumSubtitle,
        referendum_url=contest.referendumUrl,
        referendum_text=contest.referendumText,
        number_elected=contest.numberElected,
        number_voting_for=contest.numberVotingFor,
        candidates=[normalize_candidate(c) for c in contest.candidates],
        sources=normalize_sources(contest.sources),
    )


def _address_lines(address: CivicAddress) -> list[str]:
    return [line for line in (address.line1, address.line2, address.line3) if line]


def _valid_coordinates(lat: float | None, lng: float | None) -> bool:
    if lat is None or lng is None:
        return False
    return -90 <= lat <= 90 and -180 <= lng <= 180


def normalize_polling_location(
    location: CivicPollingLocation,
    location_type: LocationType | None = None,
) -> PollingLocation:
    """Map a provider polling location.

    Address sub-fields are kept verbatim; postal codes are neither
    reformatted nor validated. Coordinates are only set when the provider
    sent both latitude and longitude within WGS84 range; anything else is
    dropped rather than failing the whole result.

    Args:
        location: Provider record.
        location_type: Tag for the collection the record came from.

    Returns:
        The normalized location.
    """
    coordinates = None
    if _valid_coordinates(location.latitude, location.longitude):
        coordinates = GeoPoint(lat=location.latitude, lng=location.longitude)

    address = location.address
    return PollingLocation(
        location_type=location_type,
        name=address.locationName or location.name,
        address_lines=_address_lines(address),
        city=address.city,
        state=address.state,
        zip=address.zip,
        hours=location.pollingHours,
        coordinates=coordinates,
        notes=location.notes,
        start_date=location.startDate,
        end_date=location.endDate,
        sources=normalize_sources(location.sources),
    )


def normalize_state_resources(region: CivicAdministrativeRegion) -> StateResources:
    """Map a provider administrative region to :class:`StateResources`."""
    body = region.electionAdministrationBody
    administration_body = None
    if body is not None:
        administration_body = AdministrationBody(
            name=body.name,
            election_info_url=body.electionInfoUrl,
            election_registration_url=body.electionRegistrationUrl,
            election_registration_confirmation_url=body.electionRegistrationConfirmationUrl,
            absentee_voting_info_url=body.absenteeVotingInfoUrl,
            voting_location_finder_url=body.votingLocationFinderUrl,
            ballot_info_url=body.ballotInfoUrl,
            election_rules_url=body.electionRulesUrl,
            correspondence_address=body.correspondenceAddress,
        )

    return StateResources(
        name=region.name,
        election_administration_body=administration_body,
        sources=normalize_sources(region.sources),
    )


def _normalize_input_address(address: CivicAddress) -> Address | None:
    lines = _address_lines(address)
    if not lines:
        return None
    return Address(
        street=" ".join(lines),
        city=address.city,
        state=address.state,
        zip_code=address.zip,
    )


def normalize_voter_info(payload: VoterInfoPayload) -> VoterInfoResult:
    """Transform a ``voterinfo`` payload into a :class:`VoterInfoResult`.

    Absent collections become empty lists. Only the first ``state`` entry
    is kept; the provider returns one region per address.

    Args:
        payload: Validated provider payload.

    Returns:
        The normalized resolution result.
    """
    normalized_input = None
    if payload.normalizedInput is not None:
        normalized_input = _normalize_input_address(payload.normalizedInput)

    return VoterInfoResult(
        election=normalize_election(payload.election) if payload.election is not None else None,
        normalized_input=normalized_input,
        mail_only=payload.mailOnly,
        contests=[normalize_contest(c) for c in payload.contests],
        polling_locations=[
            normalize_polling_location(loc, LocationType.POLLING_PLACE) for loc in payload.pollingLocations
        ],
        early_vote_sites=[normalize_polling_location(loc, LocationType.EARLY_VOTING) for loc in payload.earlyVoteSites],
        drop_off_locations=[
            normalize_polling_location(loc, LocationType.DROP_OFF) for loc in payload.dropOffLocations
        ],
        state_resources=normalize_state_resources(payload.state[0]) if payload.state else None,
    )
