"""initial election watch schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

Creates elections, races, candidates, race_candidates, polling_locations,
users, user_reminders, and saved_elections. Child rows cascade on delete
of their election, race, candidate, or user.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    # --- elections ---
    op.create_table(
        "elections",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("subtype", sa.String(50), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("registration_deadline", sa.DateTime(timezone=True), nullable=True),
        sa.Column("early_voting_start", sa.DateTime(timezone=True), nullable=True),
        sa.Column("early_voting_end", sa.DateTime(timezone=True), nullable=True),
        sa.Column("jurisdiction", sa.String(255), nullable=False),
        sa.Column("jurisdiction_id", sa.String(128), nullable=False),
        sa.Column("geo_bounds", JSONB, nullable=True),
        sa.Column("status", sa.String(50), nullable=False, server_default="upcoming"),
        sa.Column("data_sources", JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("last_updated", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("type IN ('local', 'state', 'national')", name="ck_election_type"),
        sa.CheckConstraint("subtype IN ('primary', 'general', 'special', 'runoff')", name="ck_election_subtype"),
        sa.CheckConstraint("status IN ('upcoming', 'active', 'completed')", name="ck_election_status"),
    )
    op.create_index("idx_elections_date", "elections", ["date"])
    op.create_index("idx_elections_jurisdiction_id", "elections", ["jurisdiction_id"])

    # --- races ---
    op.create_table(
        "races",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column(
            "election_id",
            sa.String(128),
            sa.ForeignKey("elections.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("office_name", sa.String(255), nullable=False),
        sa.Column("office_level", sa.String(50), nullable=False),
        sa.Column("office_type", sa.String(50), nullable=False),
        sa.Column("district_number", sa.String(50), nullable=True),
        sa.Column("total_seats", sa.Integer, nullable=False, server_default="1"),
        sa.Column("term_length", sa.String(100), nullable=True),
        sa.Column("salary", sa.Integer, nullable=True),
        sa.Column("responsibilities", sa.Text, nullable=True),
        sa.Column("geo_bounds", JSONB, nullable=True),
        *_timestamps(),
        sa.CheckConstraint("office_level IN ('local', 'state', 'national')", name="ck_race_office_level"),
        sa.CheckConstraint(
            "office_type IN ('executive', 'legislative', 'judicial', 'other')", name="ck_race_office_type"
        ),
        sa.CheckConstraint("total_seats >= 1", name="ck_race_total_seats"),
    )
    op.create_index("idx_races_election_id", "races", ["election_id"])

    # --- candidates ---
    op.create_table(
        "candidates",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("party", sa.String(100), nullable=True),
        sa.Column("photo_url", sa.String(512), nullable=True),
        sa.Column("website_url", sa.String(512), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("biography", sa.Text, nullable=True),
        sa.Column("education", JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("experience", JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("platform_summary", sa.Text, nullable=True),
        sa.Column("issue_positions", JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("fundraising_total", sa.Integer, nullable=True),
        sa.Column("expenditures_total", sa.Integer, nullable=True),
        sa.Column("top_donors", JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("endorsements", JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("voting_record", JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("social_media", JSONB, nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("data_sources", JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("last_updated", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("idx_candidates_full_name", "candidates", ["full_name"])

    # --- race_candidates ---
    op.create_table(
        "race_candidates",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column(
            "race_id",
            sa.String(128),
            sa.ForeignKey("races.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "candidate_id",
            sa.String(128),
            sa.ForeignKey("candidates.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("is_incumbent", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("race_id", "candidate_id", name="uq_race_candidate"),
    )
    op.create_index("idx_race_candidates_candidate_id", "race_candidates", ["candidate_id"])

    # --- polling_locations ---
    op.create_table(
        "polling_locations",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column(
            "election_id",
            sa.String(128),
            sa.ForeignKey("elections.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", JSONB, nullable=False),
        sa.Column("geo_location", JSONB, nullable=False),
        sa.Column("location_type", sa.String(50), nullable=False),
        sa.Column("hours_open", JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("accessibility_info", sa.Text, nullable=True),
        sa.Column("parking_info", sa.Text, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "location_type IN ('polling_place', 'early_voting', 'dropbox')", name="ck_polling_location_type"
        ),
    )
    op.create_index("idx_polling_locations_election_id", "polling_locations", ["election_id"])

    # --- users ---
    op.create_table(
        "users",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("photo_url", sa.String(512), nullable=True),
        sa.Column("address", JSONB, nullable=True),
        sa.Column("geo_location", JSONB, nullable=True),
        sa.Column("timezone", sa.String(100), nullable=False, server_default="America/New_York"),
        sa.Column("email_verified", sa.Boolean, nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # --- user_reminders ---
    op.create_table(
        "user_reminders",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(128),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "election_id",
            sa.String(128),
            sa.ForeignKey("elections.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("reminder_type", sa.String(50), nullable=False),
        sa.Column("frequency", sa.String(50), nullable=False, server_default="once"),
        sa.Column("days_before_event", JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("notification_methods", JSONB, nullable=False, server_default=sa.text("'[\"push\"]'::jsonb")),
        sa.Column("enabled", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("last_sent", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "reminder_type IN ('registration', 'early_voting', 'election_day')", name="ck_user_reminder_type"
        ),
        sa.CheckConstraint("frequency IN ('once', 'daily', 'weekly')", name="ck_user_reminder_frequency"),
    )
    op.create_index("idx_user_reminders_user_id", "user_reminders", ["user_id"])

    # --- saved_elections ---
    op.create_table(
        "saved_elections",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(128),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "election_id",
            sa.String(128),
            sa.ForeignKey("elections.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", "election_id", name="uq_saved_election"),
    )


def downgrade() -> None:
    op.drop_table("saved_elections")
    op.drop_index("idx_user_reminders_user_id", table_name="user_reminders")
    op.drop_table("user_reminders")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
    op.drop_index("idx_polling_locations_election_id", table_name="polling_locations")
    op.drop_table("polling_locations")
    op.drop_index("idx_race_candidates_candidate_id", table_name="race_candidates")
    op.drop_table("race_candidates")
    op.drop_index("idx_candidates_full_name", table_name="candidates")
    op.drop_table("candidates")
    op.drop_index("idx_races_election_id", table_name="races")
    op.drop_table("races")
    op.drop_index("idx_elections_jurisdiction_id", table_name="elections")
    op.drop_index("idx_elections_date", table_name="elections")
    op.drop_table("elections")
