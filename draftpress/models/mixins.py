"""Mixins for SQLAlchemy models."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import Column, DateTime, String, event, func


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(UTC)


def generate_id() -> str:
    """Opaque record id."""
    return uuid4().hex


class IdMixin:
    """Mixin to add an opaque string primary key."""

    id = Column(String(32), primary_key=True, default=generate_id)


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=utc_now,
        nullable=False,
    )


@event.listens_for(TimestampMixin, "before_insert", propagate=True)
def _stamp_new_row(mapper, connection, target) -> None:
    # Client-side, with microseconds, so rows created in the same second still order
    now = utc_now()
    if target.created_at is None:
        target.created_at = now
    if target.updated_at is None:
        target.updated_at = target.created_at
