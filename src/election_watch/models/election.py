"""Election, race, and polling location ORM models.

Stores enriched election data keyed by opaque string ids. Deleting an
election cascades to its races, polling locations, reminders, and saves.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from election_watch.models.base import Base, JSONType, StringIdMixin, TimestampMixin, check_in

if TYPE_CHECKING:
    from election_watch.models.candidate import RaceCandidate

ELECTION_TYPES = ("local", "state", "national")
ELECTION_SUBTYPES = ("primary", "general", "special", "runoff")
ELECTION_STATUSES = ("upcoming", "active", "completed")
OFFICE_LEVELS = ("local", "state", "national")
OFFICE_TYPES = ("executive", "legislative", "judicial", "other")
LOCATION_TYPES = ("polling_place", "early_voting", "dropbox")


class Election(Base, StringIdMixin):
    """An election for a jurisdiction."""

    __tablename__ = "elections"

    type: Mapped[str] = mapped_column(String(50), nullable=False)
    subtype: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    registration_deadline: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    early_voting_start: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    early_voting_end: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    jurisdiction: Mapped[str] = mapped_column(String(255), nullable=False)
    jurisdiction_id: Mapped[str] = mapped_column(String(128), nullable=False)
    geo_bounds: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="upcoming", server_default="upcoming")
    data_sources: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    # Relationships
    races: Mapped[list["Race"]] = relationship(
        back_populates="election", cascade="all, delete-orphan", passive_deletes=True
    )
    polling_locations: Mapped[list["PollingLocation"]] = relationship(
        back_populates="election", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint(check_in("type", ELECTION_TYPES), name="ck_election_type"),
        CheckConstraint(check_in("subtype", ELECTION_SUBTYPES), name="ck_election_subtype"),
        CheckConstraint(check_in("status", ELECTION_STATUSES), name="ck_election_status"),
        Index("idx_elections_date", "date"),
        Index("idx_elections_jurisdiction_id", "jurisdiction_id"),
    )


class Race(Base, StringIdMixin, TimestampMixin):
    """A single office contest within an election."""

    __tablename__ = "races"

    election_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("elections.id", ondelete="CASCADE"),
        nullable=False,
    )
    office_name: Mapped[str] = mapped_column(String(255), nullable=False)
    office_level: Mapped[str] = mapped_column(String(50), nullable=False)
    office_type: Mapped[str] = mapped_column(String(50), nullable=False)
    district_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default="1")
    term_length: Mapped[str | None] = mapped_column(String(100), nullable=True)
    salary: Mapped[int | None] = mapped_column(Integer, nullable=True)
    responsibilities: Mapped[str | None] = mapped_column(Text, nullable=True)
    geo_bounds: Mapped[dict | None] = mapped_column(JSONType, nullable=True)

    # Relationships
    election: Mapped["Election"] = relationship(back_populates="races")
    race_candidates: Mapped[list["RaceCandidate"]] = relationship(
        back_populates="race", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint(check_in("office_level", OFFICE_LEVELS), name="ck_race_office_level"),
        CheckConstraint(check_in("office_type", OFFICE_TYPES), name="ck_race_office_type"),
        CheckConstraint("total_seats >= 1", name="ck_race_total_seats"),
        Index("idx_races_election_id", "election_id"),
    )


class PollingLocation(Base, StringIdMixin, TimestampMixin):
    """A stored polling place, early-voting site, or drop box."""

    __tablename__ = "polling_locations"

    election_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("elections.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[dict] = mapped_column(JSONType, nullable=False)
    geo_location: Mapped[dict] = mapped_column(JSONType, nullable=False)
    location_type: Mapped[str] = mapped_column(String(50), nullable=False)
    hours_open: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    accessibility_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    parking_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    election: Mapped["Election"] = relationship(back_populates="polling_locations")

    __table_args__ = (
        CheckConstraint(check_in("location_type", LOCATION_TYPES), name="ck_polling_location_type"),
        Index("idx_polling_locations_election_id", "election_id"),
    )
