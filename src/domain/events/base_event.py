"""Base domain event class.

Domain events represent "things that happened" in the engine and are
always named in past tense (RegistrationCreated, EventCancellationSucceeded).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - Published only after the state they describe has been persisted

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class RegistrationCreated(DomainEvent):
    ...     registration_id: UUID
    ...     event_id: UUID
    >>>
    >>> event = RegistrationCreated(registration_id=uuid7(), event_id=uuid7())
    >>> print(event.event_id)  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (RegistrationCancelled, NOT CancelRegistration)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
