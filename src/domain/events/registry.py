"""Domain Events Registry - Single Source of Truth.

Catalogs every domain event with the metadata the container needs to
subscribe handlers automatically.

Adding new events:
1. Define event dataclass in the appropriate *_events.py file
2. Add entry to EVENT_REGISTRY below
3. Add the handler method to LoggingEventHandler (tests check this)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Type

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


class EventGroup(Enum):
    """Event groups for organization and filtering."""

    EVENT = "event"
    REGISTRATION = "registration"


class WorkflowPhase(Enum):
    """Workflow phases for the ATTEMPT → OUTCOME pattern."""

    ATTEMPTED = "attempted"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    OPERATIONAL = "operational"  # For single-state operational events


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        group: Event group.
        workflow_name: Name of workflow (e.g., "event_cancellation").
        phase: Workflow phase.
        requires_logging: LoggingEventHandler handles this event.
    """

    event_class: Type[DomainEvent]
    group: EventGroup
    workflow_name: str
    phase: WorkflowPhase
    requires_logging: bool = True

    @property
    def handler_method(self) -> str:
        """Handler method name expected on subscribing handlers."""
        if self.phase == WorkflowPhase.OPERATIONAL:
            return f"handle_{self.workflow_name}"
        return f"handle_{self.workflow_name}_{self.phase.value}"


# ═══════════════════════════════════════════════════════════════
# EVENT REGISTRY - Single Source of Truth
# ═══════════════════════════════════════════════════════════════

EVENT_REGISTRY: list[EventMetadata] = [
    # Event lifecycle
    EventMetadata(
        event_class=EventCreated,
        group=EventGroup.EVENT,
        workflow_name="event_created",
        phase=WorkflowPhase.OPERATIONAL,
    ),
    EventMetadata(
        event_class=EventUpdated,
        group=EventGroup.EVENT,
        workflow_name="event_updated",
        phase=WorkflowPhase.OPERATIONAL,
    ),
    EventMetadata(
        event_class=EventCancellationAttempted,
        group=EventGroup.EVENT,
        workflow_name="event_cancellation",
        phase=WorkflowPhase.ATTEMPTED,
    ),
    EventMetadata(
        event_class=EventCancellationSucceeded,
        group=EventGroup.EVENT,
        workflow_name="event_cancellation",
        phase=WorkflowPhase.SUCCEEDED,
    ),
    EventMetadata(
        event_class=EventCancellationFailed,
        group=EventGroup.EVENT,
        workflow_name="event_cancellation",
        phase=WorkflowPhase.FAILED,
    ),
    # Registration lifecycle
    EventMetadata(
        event_class=RegistrationCreated,
        group=EventGroup.REGISTRATION,
        workflow_name="registration_created",
        phase=WorkflowPhase.OPERATIONAL,
    ),
    EventMetadata(
        event_class=RegistrationCancelled,
        group=EventGroup.REGISTRATION,
        workflow_name="registration_cancelled",
        phase=WorkflowPhase.OPERATIONAL,
    ),
    EventMetadata(
        event_class=RegistrationStatusChanged,
        group=EventGroup.REGISTRATION,
        workflow_name="registration_status_changed",
        phase=WorkflowPhase.OPERATIONAL,
    ),
    EventMetadata(
        event_class=AttendanceMarked,
        group=EventGroup.REGISTRATION,
        workflow_name="attendance_marked",
        phase=WorkflowPhase.OPERATIONAL,
    ),
    EventMetadata(
        event_class=WaitlistPromoted,
        group=EventGroup.REGISTRATION,
        workflow_name="waitlist_promoted",
        phase=WorkflowPhase.OPERATIONAL,
    ),
]


def get_events_requiring_handler(handler_type: str) -> list[Type[DomainEvent]]:
    """Get all events that require a specific handler.

    Args:
        handler_type: Handler type ('logging').

    Returns:
        List of event classes requiring that handler.

    Raises:
        ValueError: If handler_type is unknown.
    """
    field_map = {"logging": "requires_logging"}

    if handler_type not in field_map:
        raise ValueError(
            f"Invalid handler_type: {handler_type}. "
            f"Must be one of: {list(field_map.keys())}"
        )

    field = field_map[handler_type]
    return [meta.event_class for meta in EVENT_REGISTRY if getattr(meta, field)]
