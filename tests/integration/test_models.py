"""Integration tests for the persisted election, candidate, and user schema."""

from datetime import UTC, datetime

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from election_watch.models import (
    Candidate,
    Election,
    PollingLocation,
    Race,
    RaceCandidate,
    SavedElection,
    User,
    UserReminder,
)


def _election(**overrides: object) -> Election:
    values: dict = {
        "type": "local",
        "subtype": "general",
        "name": "Springfield Municipal Election",
        "date": datetime(2026, 11, 3, tzinfo=UTC),
        "jurisdiction": "Springfield, IL",
        "jurisdiction_id": "ocd-division/country:us/state:il/place:springfield",
    }
    values.update(overrides)
    return Election(**values)


async def _count(session: AsyncSession, model: type) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar_one()


@pytest.fixture
async def populated(async_session: AsyncSession) -> dict:
    election = _election()
    race = Race(election=election, office_name="Mayor", office_level="local", office_type="executive")
    candidate = Candidate(first_name="Alex", last_name="Rivera", full_name="Alex Rivera", party="Nonpartisan")
    race_candidate = RaceCandidate(race=race, candidate=candidate, is_incumbent=True)
    location = PollingLocation(
        election=election,
        name="Springfield High School",
        address={"street": "101 School Rd", "city": "Springfield", "state": "IL", "zipCode": "62701"},
        geo_location={"lat": 39.799, "lng": -89.644},
        location_type="polling_place",
    )
    user = User(email="voter@example.com")
    async_session.add_all([election, race, candidate, race_candidate, location, user])
    await async_session.flush()

    reminder = UserReminder(user_id=user.id, election_id=election.id, reminder_type="election_day")
    saved = SavedElection(user_id=user.id, election_id=election.id)
    async_session.add_all([reminder, saved])
    await async_session.commit()
    return {"election": election, "race": race, "candidate": candidate, "user": user}


class TestDefaults:
    async def test_ids_and_defaults_assigned(self, async_session: AsyncSession, populated: dict) -> None:
        election = populated["election"]
        assert len(election.id) == 32
        assert election.status == "upcoming"
        assert election.data_sources == []
        assert populated["race"].total_seats == 1
        assert populated["candidate"].education == []
        assert populated["candidate"].social_media == {}

    async def test_is_incumbent_is_boolean(self, async_session: AsyncSession, populated: dict) -> None:
        row = (await async_session.execute(select(RaceCandidate))).scalar_one()
        assert row.is_incumbent is True

    async def test_reminder_defaults(self, async_session: AsyncSession, populated: dict) -> None:
        reminder = (await async_session.execute(select(UserReminder))).scalar_one()
        assert reminder.frequency == "once"
        assert reminder.enabled is True
        assert reminder.notification_methods == ["push"]


class TestCascades:
    async def test_deleting_election_cascades(self, async_session: AsyncSession, populated: dict) -> None:
        await async_session.delete(populated["election"])
        await async_session.commit()

        assert await _count(async_session, Race) == 0
        assert await _count(async_session, RaceCandidate) == 0
        assert await _count(async_session, PollingLocation) == 0
        assert await _count(async_session, UserReminder) == 0
        assert await _count(async_session, SavedElection) == 0
        # Candidates and users outlive the election
        assert await _count(async_session, Candidate) == 1
        assert await _count(async_session, User) == 1

    async def test_deleting_candidate_removes_race_links(self, async_session: AsyncSession, populated: dict) -> None:
        await async_session.delete(populated["candidate"])
        await async_session.commit()

        assert await _count(async_session, RaceCandidate) == 0
        assert await _count(async_session, Race) == 1

    async def test_deleting_user_cascades(self, async_session: AsyncSession, populated: dict) -> None:
        await async_session.delete(populated["user"])
        await async_session.commit()

        assert await _count(async_session, UserReminder) == 0
        assert await _count(async_session, SavedElection) == 0
        assert await _count(async_session, Election) == 1


class TestConstraints:
    async def test_invalid_election_type_rejected(self, async_session: AsyncSession) -> None:
        async_session.add(_election(type="galactic"))
        with pytest.raises(IntegrityError):
            await async_session.commit()

    async def test_invalid_location_type_rejected(self, async_session: AsyncSession) -> None:
        election = _election()
        async_session.add(
            PollingLocation(
                election=election,
                name="Somewhere",
                address={},
                geo_location={},
                location_type="mailbox",
            )
        )
        with pytest.raises(IntegrityError):
            await async_session.commit()

    async def test_duplicate_race_candidate_rejected(self, async_session: AsyncSession, populated: dict) -> None:
        async_session.add(RaceCandidate(race_id=populated["race"].id, candidate_id=populated["candidate"].id))
        with pytest.raises(IntegrityError):
            await async_session.commit()

    async def test_invalid_reminder_frequency_rejected(self, async_session: AsyncSession, populated: dict) -> None:
        async_session.add(
            UserReminder(
                user_id=populated["user"].id,
                election_id=populated["election"].id,
                reminder_type="registration",
                frequency="hourly",
            )
        )
        with pytest.raises(IntegrityError):
            await async_session.commit()
