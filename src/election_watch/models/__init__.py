"""ORM model registry. Import all models so Alembic autogenerate discovers them."""

from election_watch.models.candidate import Candidate, RaceCandidate
from election_watch.models.election import Election, PollingLocation, Race
from election_watch.models.user import SavedElection, User, UserReminder

__all__ = [
    "Candidate",
    "Election",
    "PollingLocation",
    "Race",
    "RaceCandidate",
    "SavedElection",
    "User",
    "UserReminder",
]
