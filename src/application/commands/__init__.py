"""Commands (CQRS write operations)."""

from src.application.commands.event_commands import (
    CancelEvent,
    CreateEvent,
    ResumeEventCancellations,
    UpdateEvent,
    UpdateEventStatus,
)
from src.application.commands.registration_commands import (
    CancelRegistration,
    MarkAttendance,
    PromoteWaitlist,
    RegisterForEvent,
    UpdateRegistration,
)

__all__ = [
    "CancelEvent",
    "CancelRegistration",
    "CreateEvent",
    "MarkAttendance",
    "PromoteWaitlist",
    "RegisterForEvent",
    "ResumeEventCancellations",
    "UpdateEvent",
    "UpdateEventStatus",
    "UpdateRegistration",
]
