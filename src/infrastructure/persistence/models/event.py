"""Event database model.

Architecture:
    - Events are never physically deleted (soft delete via status)
    - Status, category and location type stored as lowercase strings
    - Tags stored as JSON (JSONB on PostgreSQL)
    - cancellation_requested_at marks an unfinished cancellation cascade
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, DateTime, Index, Integer, String, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Event(BaseMutableModel):
    """Event model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when created (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        organizer_id: Owning organizer's user id
        title / description: Display text
        category: conference, workshop, webinar, social, sports
        start_at / end_at: Time window
        location_type: physical, online, hybrid
        address / city / country / virtual_link: Location parts
        capacity: Maximum confirmed registrations
        registration_deadline: Registrations refused afterwards
        status: draft, published, cancelled
        tags: JSON list of strings
        image_url / requirements / agenda: Free-text metadata
        cancellation_requested_at: Pending cascade marker (nullable)

    Indexes:
        - ix_events_organizer_id: Organizer listings
        - ix_events_status: Visibility filter
        - ix_events_status_start_at: Visible listing ordered by start
        - ix_events_cancellation_requested_at: Pending cascade lookup
    """

    __tablename__ = "events"

    organizer_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)

    start_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    location_type: Mapped[str] = mapped_column(String(20), nullable=False)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    virtual_link: Mapped[str | None] = mapped_column(String(500), nullable=True)

    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    registration_deadline: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    tags: Mapped[list[str]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=list
    )
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    requirements: Mapped[str | None] = mapped_column(Text, nullable=True)
    agenda: Mapped[str | None] = mapped_column(Text, nullable=True)

    cancellation_requested_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    __table_args__ = (Index("ix_events_status_start_at", "status", "start_at"),)

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title!r}, status={self.status})>"
