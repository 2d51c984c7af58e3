"""User, reminder preference, and saved election ORM models.

Reminder rows only record preferences; nothing in this service sends
reminders.
"""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    String,
    UniqueConstraint,
    false,
    func,
    true,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from election_watch.models.base import Base, JSONType, StringIdMixin, TimestampMixin, check_in

REMINDER_TYPES = ("registration", "early_voting", "election_day")
REMINDER_FREQUENCIES = ("once", "daily", "weekly")


class User(Base, StringIdMixin, TimestampMixin):
    """A registered user with an optional home address."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    photo_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    address: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    geo_location: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    timezone: Mapped[str] = mapped_column(
        String(100), nullable=False, default="America/New_York", server_default="America/New_York"
    )
    email_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    # Relationships
    reminders: Mapped[list["UserReminder"]] = relationship(cascade="all, delete-orphan", passive_deletes=True)
    saved_elections: Mapped[list["SavedElection"]] = relationship(cascade="all, delete-orphan", passive_deletes=True)


class UserReminder(Base, StringIdMixin, TimestampMixin):
    """A user's reminder preference for one election."""

    __tablename__ = "user_reminders"

    user_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    election_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("elections.id", ondelete="CASCADE"),
        nullable=False,
    )
    reminder_type: Mapped[str] = mapped_column(String(50), nullable=False)
    frequency: Mapped[str] = mapped_column(String(50), nullable=False, default="once", server_default="once")
    days_before_event: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    notification_methods: Mapped[list] = mapped_column(JSONType, nullable=False, default=lambda: ["push"])
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())
    last_sent: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        CheckConstraint(check_in("reminder_type", REMINDER_TYPES), name="ck_user_reminder_type"),
        CheckConstraint(check_in("frequency", REMINDER_FREQUENCIES), name="ck_user_reminder_frequency"),
        Index("idx_user_reminders_user_id", "user_id"),
    )


class SavedElection(Base, StringIdMixin):
    """An election bookmarked by a user."""

    __tablename__ = "saved_elections"

    user_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    election_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("elections.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (UniqueConstraint("user_id", "election_id", name="uq_saved_election"),)
