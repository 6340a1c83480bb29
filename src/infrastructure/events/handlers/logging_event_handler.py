"""Logging event handler for domain events.

Structured logging for every event in EVENT_REGISTRY.

Log Levels:
    - INFO: Operational events, ATTEMPTED and SUCCEEDED phases
    - WARNING: FAILED phases (interrupted cancellation cascade)

Structured Fields:
    - event_id: UUID for event correlation and deduplication
    - occurred_at: ISO 8601 timestamp (UTC)
    - entity ids and statuses relevant to each event

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(
    ...     RegistrationCreated, logging_handler.handle_registration_created
    ... )
"""

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
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    # =========================================================================
    # Event Lifecycle Handlers
    # =========================================================================

    async def handle_event_created(self, event: EventCreated) -> None:
        """Log event creation (INFO level)."""
        self._logger.info(
            "event_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            event_entity_id=str(event.event_entity_id),
            organizer_id=str(event.organizer_id),
            capacity=event.capacity,
        )

    async def handle_event_updated(self, event: EventUpdated) -> None:
        """Log event update (INFO level)."""
        self._logger.info(
            "event_updated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            event_entity_id=str(event.event_entity_id),
            status=event.status,
        )

    async def handle_event_cancellation_attempted(
        self, event: EventCancellationAttempted
    ) -> None:
        """Log cancellation cascade start (INFO level)."""
        self._logger.info(
            "event_cancellation_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            event_entity_id=str(event.event_entity_id),
            resumed=event.resumed,
        )

    async def handle_event_cancellation_succeeded(
        self, event: EventCancellationSucceeded
    ) -> None:
        """Log completed cancellation cascade (INFO level)."""
        self._logger.info(
            "event_cancellation_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            event_entity_id=str(event.event_entity_id),
            cancelled_registrations=event.cancelled_registrations,
        )

    async def handle_event_cancellation_failed(
        self, event: EventCancellationFailed
    ) -> None:
        """Log interrupted cancellation cascade (WARNING level).

        The event keeps its cancellation marker; ResumeEventCancellations
        completes it.
        """
        self._logger.warning(
            "event_cancellation_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            event_entity_id=str(event.event_entity_id),
            cancelled_registrations=event.cancelled_registrations,
            reason=event.reason,
        )

    # =========================================================================
    # Registration Lifecycle Handlers
    # =========================================================================

    async def handle_registration_created(self, event: RegistrationCreated) -> None:
        """Log admission outcome (INFO level)."""
        self._logger.info(
            "registration_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            registration_id=str(event.registration_id),
            event_entity_id=str(event.event_entity_id),
            user_id=str(event.user_id),
            status=event.status.value,
        )

    async def handle_registration_cancelled(
        self, event: RegistrationCancelled
    ) -> None:
        self._logger.info(
            "registration_cancelled",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            registration_id=str(event.registration_id),
            event_entity_id=str(event.event_entity_id),
            user_id=str(event.user_id),
        )

    async def handle_registration_status_changed(
        self, event: RegistrationStatusChanged
    ) -> None:
        self._logger.info(
            "registration_status_changed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            registration_id=str(event.registration_id),
            event_entity_id=str(event.event_entity_id),
            old_status=event.old_status.value,
            new_status=event.new_status.value,
        )

    async def handle_attendance_marked(self, event: AttendanceMarked) -> None:
        self._logger.info(
            "attendance_marked",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            registration_id=str(event.registration_id),
            attended=event.attended,
        )

    async def handle_waitlist_promoted(self, event: WaitlistPromoted) -> None:
        self._logger.info(
            "waitlist_promoted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            registration_id=str(event.registration_id),
            event_entity_id=str(event.event_entity_id),
            user_id=str(event.user_id),
        )
