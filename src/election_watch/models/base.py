"""Declarative base and shared column mixins for ORM models."""

import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


def new_id() -> str:
    """Generate an opaque string primary key."""
    return uuid.uuid4().hex


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


class StringIdMixin:
    """Opaque string primary key."""

    id: Mapped[str] = mapped_column(String(128), primary_key=True, default=new_id)


class TimestampMixin:
    """created_at / updated_at columns maintained by the database."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


def check_in(column: str, values: tuple[str, ...]) -> str:
    """Render a ``column IN (...)`` check-constraint expression."""
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"
