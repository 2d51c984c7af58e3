"""Candidate and race-candidate ORM models.

Candidate profile data (education, positions, finance, endorsements,
voting record) is stored as JSON documents on the candidate row.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint, false, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from election_watch.models.base import Base, JSONType, StringIdMixin

if TYPE_CHECKING:
    from election_watch.models.election import Race


class Candidate(Base, StringIdMixin):
    """A person running for office, with enriched profile data."""

    __tablename__ = "candidates"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    party: Mapped[str | None] = mapped_column(String(100), nullable=True)
    photo_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    website_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Biographical
    biography: Mapped[str | None] = mapped_column(Text, nullable=True)
    education: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    experience: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)

    # Platform
    platform_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    issue_positions: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)

    # Campaign finance (whole dollars)
    fundraising_total: Mapped[int | None] = mapped_column(Integer, nullable=True)
    expenditures_total: Mapped[int | None] = mapped_column(Integer, nullable=True)
    top_donors: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)

    endorsements: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    voting_record: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    social_media: Mapped[dict] = mapped_column(JSONType, nullable=False, default=dict)

    # Provenance: [{name, url, type, scrapedAt}]
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
    race_candidates: Mapped[list["RaceCandidate"]] = relationship(
        back_populates="candidate", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (Index("idx_candidates_full_name", "full_name"),)


class RaceCandidate(Base, StringIdMixin):
    """Association of a candidate with a race."""

    __tablename__ = "race_candidates"

    race_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("races.id", ondelete="CASCADE"),
        nullable=False,
    )
    candidate_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("candidates.id", ondelete="CASCADE"),
        nullable=False,
    )
    is_incumbent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    # Relationships
    race: Mapped["Race"] = relationship(back_populates="race_candidates")
    candidate: Mapped["Candidate"] = relationship(back_populates="race_candidates")

    __table_args__ = (
        UniqueConstraint("race_id", "candidate_id", name="uq_race_candidate"),
        Index("idx_race_candidates_candidate_id", "candidate_id"),
    )
