"""Shared test fixtures for settings, async database, and provider payloads."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

import election_watch.models  # noqa: F401
from election_watch.core.config import Settings
from election_watch.models.base import Base


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        google_civic_api_key="test-civic-key",
        database_url="sqlite+aiosqlite:///:memory:",
        rate_limit_per_minute=1000,
    )


@pytest.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory async SQLite engine with foreign keys enforced."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record) -> None:  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def async_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create a per-test async session."""
    session_factory = async_sessionmaker(async_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def elections_json() -> dict[str, Any]:
    """A provider ``elections`` document."""
    return {
        "kind": "civicinfo#electionsQueryResponse",
        "elections": [
            {
                "id": "2000",
                "name": "VIP Test Election",
                "electionDay": "2026-06-06",
                "ocdDivisionId": "ocd-division/country:us",
            },
            {
                "id": 9001,
                "name": "Illinois General Election",
                "electionDay": "2026-11-03",
                "ocdDivisionId": "ocd-division/country:us/state:il",
            },
        ],
    }


@pytest.fixture
def voter_info_json() -> dict[str, Any]:
    """A provider ``voterinfo`` document for 123 Main St, Springfield, IL."""
    return {
        "kind": "civicinfo#voterInfoResponse",
        "election": {
            "id": "9001",
            "name": "Illinois General Election",
            "electionDay": "2026-11-03",
            "ocdDivisionId": "ocd-division/country:us/state:il",
        },
        "normalizedInput": {
            "line1": "123 Main St",
            "city": "Springfield",
            "state": "IL",
            "zip": "62701",
        },
        "mailOnly": False,
        "contests": [
            {
                "type": "General",
                "office": "Mayor",
                "ballotPlacement": "1",
                "numberElected": "1",
                "numberVotingFor": "1",
                "level": ["locality"],
                "roles": ["headOfGovernment"],
                "district": {
                    "name": "Springfield",
                    "scope": "citywide",
                    "id": "ocd-division/country:us/state:il/place:springfield",
                },
                "candidates": [
                    {
                        "name": "Alex Rivera",
                        "party": "Nonpartisan",
                        "candidateUrl": "https://rivera.example.com",
                        "orderOnBallot": 1,
                        "channels": [
                            {"type": "Twitter", "id": "riveraformayor"},
                            {"type": "Mastodon", "id": "@rivera@civic.example"},
                        ],
                    },
                    {"name": "Jordan Lee", "orderOnBallot": 2},
                ],
                "sources": [{"name": "Ballot Information Project", "official": False}],
            },
            {
                "type": "Referendum",
                "referendumTitle": "Proposition 1",
                "referendumSubtitle": "Library funding",
                "referendumUrl": "https://ballot.example.com/prop1",
                "referendumText": "Shall the city levy a library tax?",
                "candidates": None,
            },
        ],
        "pollingLocations": [
            {
                "address": {
                    "locationName": "Springfield High School",
                    "line1": "101 School Rd",
                    "line2": "Gym entrance",
                    "city": "Springfield",
                    "state": "IL",
                    "zip": "62701",
                },
                "pollingHours": "6am - 7pm",
                "latitude": 39.7990,
                "longitude": -89.6440,
                "sources": [{"name": "Voting Information Project", "official": True}],
            },
            {
                "address": {"locationName": "Fire Station 3", "line1": "300 Oak Ave", "city": "Springfield"},
            },
        ],
        "earlyVoteSites": [
            {
                "address": {"locationName": "County Clerk", "line1": "200 S 9th St", "city": "Springfield"},
                "startDate": "2026-10-20",
                "endDate": "2026-11-02",
                "latitude": 39.8000,
                "longitude": -89.6500,
            }
        ],
        "dropOffLocations": None,
        "state": [
            {
                "name": "Illinois",
                "electionAdministrationBody": {
                    "name": "State Board of Elections",
                    "electionInfoUrl": "https://www.elections.il.gov",
                    "electionRegistrationUrl": "https://ova.elections.il.gov",
                },
                "sources": [{"name": "Voting Information Project", "official": True}],
            }
        ],
    }
