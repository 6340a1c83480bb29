"""Domain events module.

Usage:
    >>> from src.domain.events import RegistrationCreated
    >>>
    >>> await event_bus.publish(RegistrationCreated(...))
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.event_lifecycle_events import (
    EventCancellationAttempted,
    EventCancellationFailed,
    EventCancellationSucceeded,
    EventCreated,
    EventUpdated,
)
from src.domain.events.registration_events import (
    AttendanceMarked,
    RegistrationCancelled,
    RegistrationCreated,
    RegistrationStatusChanged,
    WaitlistPromoted,
)

__all__ = [
    "DomainEvent",
    # Event lifecycle
    "EventCreated",
    "EventUpdated",
    "EventCancellationAttempted",
    "EventCancellationSucceeded",
    "EventCancellationFailed",
    # Registration lifecycle
    "RegistrationCreated",
    "RegistrationCancelled",
    "RegistrationStatusChanged",
    "AttendanceMarked",
    "WaitlistPromoted",
]
