"""Registration database model.

Architecture:
    - event_id references events.id; user_id is an external identity
    - Status stored as lowercase string
    - Partial unique index: at most one non-cancelled registration per
      (event_id, user_id)
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
    Uuid,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel

_ACTIVE = text("status <> 'cancelled'")


class Registration(BaseMutableModel):
    """Registration model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at / updated_at: Timestamps (from BaseMutableModel)
        event_id: FK to events table
        user_id: Registering user
        status: confirmed, waitlisted, cancelled
        registration_date: Admission time (waitlist FIFO order)
        notes: Free text (nullable)
        attended: Attendance flag

    Indexes:
        - ix_registrations_event_id: Event lookups
        - ix_registrations_user_id: User lookups
        - ix_registrations_event_id_status: Capacity counts and waitlist
        - uq_registrations_active_event_user: One active registration per pair
    """

    __tablename__ = "registrations"

    event_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("events.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    registration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    attended: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("ix_registrations_event_id_status", "event_id", "status"),
        Index(
            "uq_registrations_active_event_user",
            "event_id",
            "user_id",
            unique=True,
            postgresql_where=_ACTIVE,
            sqlite_where=_ACTIVE,
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<Registration(id={self.id}, event_id={self.event_id}, "
            f"user_id={self.user_id}, status={self.status})>"
        )
