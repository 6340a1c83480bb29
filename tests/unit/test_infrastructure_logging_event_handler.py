"""Unit tests for LoggingEventHandler."""

import pytest
from uuid_extensions import uuid7

from src.domain.enums.registration_status import RegistrationStatus
from src.domain.events.event_lifecycle_events import (
    EventCancellationFailed,
    EventCreated,
)
from src.domain.events.registration_events import RegistrationStatusChanged
from src.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test structured log output per event."""

    @pytest.mark.asyncio
    async def test_event_created_logged_at_info(self, mock_logger):
        handler = LoggingEventHandler(logger=mock_logger)
        event = EventCreated(
            event_id=uuid7(),
            event_entity_id=uuid7(),
            organizer_id=uuid7(),
            title="Python Meetup",
            capacity=25,
        )

        await handler.handle_event_created(event)

        args, kwargs = mock_logger.info.call_args
        assert args[0] == "event_created"
        assert kwargs["event_entity_id"] == str(event.event_entity_id)
        assert kwargs["capacity"] == 25

    @pytest.mark.asyncio
    async def test_cancellation_failure_logged_at_warning(self, mock_logger):
        handler = LoggingEventHandler(logger=mock_logger)
        event = EventCancellationFailed(
            event_id=uuid7(),
            event_entity_id=uuid7(),
            cancelled_registrations=4,
            reason="cancel registrations: connection reset",
        )

        await handler.handle_event_cancellation_failed(event)

        mock_logger.info.assert_not_called()
        args, kwargs = mock_logger.warning.call_args
        assert args[0] == "event_cancellation_failed"
        assert kwargs["cancelled_registrations"] == 4
        assert kwargs["reason"] == "cancel registrations: connection reset"

    @pytest.mark.asyncio
    async def test_status_change_logs_enum_values(self, mock_logger):
        handler = LoggingEventHandler(logger=mock_logger)

        await handler.handle_registration_status_changed(
            RegistrationStatusChanged(
                event_id=uuid7(),
                registration_id=uuid7(),
                event_entity_id=uuid7(),
                old_status=RegistrationStatus.WAITLISTED,
                new_status=RegistrationStatus.CONFIRMED,
            )
        )

        _, kwargs = mock_logger.info.call_args
        assert kwargs["old_status"] == "waitlisted"
        assert kwargs["new_status"] == "confirmed"
