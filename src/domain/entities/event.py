"""Event domain entity.

An event is owned by its organizer and admits registrations up to its
capacity. Status is the single source of truth for visibility: cancelled
events are hidden from every end-user read.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Construction errors raise ValueError (programming/input errors)
    - State transitions return Result types
    - Cancellation is a two-phase soft delete guarded by a persisted marker

Usage:
    from uuid_extensions import uuid7
    from src.domain.entities import Event
    from src.domain.enums import EventCategory, LocationType
    from src.domain.value_objects import Location

    event = Event(
        id=uuid7(),
        organizer_id=organizer_id,
        title="PyCon Meetup",
        description="Monthly meetup",
        category=EventCategory.SOCIAL,
        start_at=start,
        end_at=end,
        location=Location(type=LocationType.ONLINE, virtual_link="https://..."),
        capacity=50,
        registration_deadline=deadline,
    )
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.core.result import Failure, Result, Success
from src.domain.enums.event_category import EventCategory
from src.domain.enums.event_status import EventStatus
from src.domain.errors.event_error import EventError
from src.domain.value_objects.location import Location


@dataclass
class Event:
    """Capacity-constrained event.

    Attributes:
        id: Unique event identifier, immutable once assigned.
        organizer_id: Owning organizer's user id.
        title: Display title (required).
        description: Free-text description (required).
        category: Event category.
        start_at: Start of the time window (UTC).
        end_at: End of the time window (UTC), after start_at.
        location: Where the event happens.
        capacity: Maximum confirmed registrations (>= 1).
        registration_deadline: Registrations are refused after this moment.
        status: Lifecycle status (PUBLISHED on creation).
        tags: Free-form labels.
        image_url: Optional cover image.
        requirements: Optional free text for attendees.
        agenda: Optional free-text agenda.
        cancellation_requested_at: Set while a cancellation cascade is in
            progress; cleared once the event itself is CANCELLED.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    # Required fields
    id: UUID
    organizer_id: UUID
    title: str
    description: str
    category: EventCategory
    start_at: datetime
    end_at: datetime
    location: Location
    capacity: int
    registration_deadline: datetime

    # Optional fields
    status: EventStatus = EventStatus.PUBLISHED
    tags: list[str] = field(default_factory=list)
    image_url: str | None = None
    requirements: str | None = None
    agenda: str | None = None
    cancellation_requested_at: datetime | None = None

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate event after initialization.

        Raises:
            ValueError: If title, description, capacity or time window is invalid.
        """
        _validate_fields(
            title=self.title,
            description=self.description,
            capacity=self.capacity,
            start_at=self.start_at,
            end_at=self.end_at,
        )

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def is_cancelled(self) -> bool:
        """Check if event has been soft-deleted."""
        return self.status == EventStatus.CANCELLED

    def is_visible(self) -> bool:
        """Check if event may be surfaced to end users."""
        return not self.is_cancelled()

    def is_cancellation_pending(self) -> bool:
        """Check if a cancellation cascade started but did not finish."""
        return self.cancellation_requested_at is not None and not self.is_cancelled()

    def is_registration_open(self, now: datetime | None = None) -> bool:
        """Check if new registrations are accepted.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            True if event is PUBLISHED and the deadline has not passed.
        """
        now = now or datetime.now(UTC)
        return (
            self.status == EventStatus.PUBLISHED
            and now <= self.registration_deadline
        )

    def is_owned_by(self, user_id: UUID) -> bool:
        """Check if user is the organizer of this event."""
        return self.organizer_id == user_id

    # -------------------------------------------------------------------------
    # State Transitions
    # -------------------------------------------------------------------------

    def update_details(
        self,
        *,
        title: str,
        description: str,
        category: EventCategory,
        start_at: datetime,
        end_at: datetime,
        location: Location,
        capacity: int,
        registration_deadline: datetime,
        tags: list[str],
        image_url: str | None = None,
        requirements: str | None = None,
        agenda: str | None = None,
    ) -> Result[None, str]:
        """Overwrite all mutable descriptive fields and the location.

        Capacity reductions are not retroactively enforced against
        registrations that are already confirmed.

        Returns:
            Success(None): Fields replaced and updated_at refreshed.
            Failure(error): A field failed validation; nothing was changed.
        """
        try:
            _validate_fields(
                title=title,
                description=description,
                capacity=capacity,
                start_at=start_at,
                end_at=end_at,
            )
        except ValueError as e:
            return Failure(error=str(e))

        self.title = title
        self.description = description
        self.category = category
        self.start_at = start_at
        self.end_at = end_at
        self.location = location
        self.capacity = capacity
        self.registration_deadline = registration_deadline
        self.tags = list(tags)
        self.image_url = image_url
        self.requirements = requirements
        self.agenda = agenda
        self.updated_at = datetime.now(UTC)
        return Success(value=None)

    def change_status(self, target: EventStatus) -> Result[None, str]:
        """Move to a non-cancelled status according to the transition table.

        Cancellation is not handled here; it goes through
        begin_cancellation() / complete_cancellation() so dependent
        registrations are cascaded.

        Args:
            target: DRAFT or PUBLISHED.

        Returns:
            Success(None): Status set (same-status is a no-op).
            Failure(error): Edge not allowed.
        """
        if target == EventStatus.CANCELLED or not self.status.can_transition_to(target):
            return Failure(error=EventError.INVALID_TRANSITION)

        if self.status != target:
            self.status = target
            self.updated_at = datetime.now(UTC)
        return Success(value=None)

    def begin_cancellation(self, now: datetime | None = None) -> None:
        """Persistable marker that a cancellation cascade is in progress.

        Idempotent: an existing marker keeps its original timestamp.
        """
        if self.cancellation_requested_at is None:
            self.cancellation_requested_at = now or datetime.now(UTC)
            self.updated_at = datetime.now(UTC)

    def complete_cancellation(self) -> None:
        """Finalize the soft delete once all registrations are cancelled."""
        self.status = EventStatus.CANCELLED
        self.cancellation_requested_at = None
        self.updated_at = datetime.now(UTC)


def _validate_fields(
    *,
    title: str,
    description: str,
    capacity: int,
    start_at: datetime,
    end_at: datetime,
) -> None:
    if not title or not title.strip():
        raise ValueError(EventError.INVALID_TITLE)
    if not description or not description.strip():
        raise ValueError(EventError.INVALID_DESCRIPTION)
    if capacity < 1:
        raise ValueError(EventError.INVALID_CAPACITY)
    if end_at <= start_at:
        raise ValueError(EventError.INVALID_TIME_WINDOW)
