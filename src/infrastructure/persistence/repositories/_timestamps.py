"""Timestamp normalization for rows read back from the database."""

from datetime import UTC, datetime


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps (SQLite drops tzinfo on round-trip)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def as_utc_optional(value: datetime | None) -> datetime | None:
    return None if value is None else as_utc(value)
