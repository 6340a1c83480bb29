"""MarkAttendance command handler.

Sets the attended flag. Role gating (organizer/admin) happens before
dispatch.
"""

from uuid_extensions import uuid7

from src.application.commands.registration_commands import MarkAttendance
from src.application.errors.failures import registration_not_found, storage_failure
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.registration import Registration
from src.domain.events.registration_events import AttendanceMarked
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.registration_repository import RegistrationRepository


class MarkAttendanceHandler:
    """Handler for MarkAttendance command."""

    def __init__(
        self,
        registration_repo: RegistrationRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._registration_repo = registration_repo
        self._event_bus = event_bus

    async def handle(self, cmd: MarkAttendance) -> Result[Registration, DomainError]:
        """Handle MarkAttendance command.

        Returns:
            Success(Registration): Flag recorded.
            Failure(NotFoundError): Registration does not exist.
            Failure(StorageError): Read or write failed.
        """
        try:
            registration = await self._registration_repo.find_by_id(
                cmd.registration_id
            )
            if registration is None:
                return Failure(error=registration_not_found(cmd.registration_id))

            registration.mark_attendance(cmd.attended)
            await self._registration_repo.save(registration)
        except Exception as e:
            return Failure(error=storage_failure("mark attendance", e))

        await self._event_bus.publish(
            AttendanceMarked(
                event_id=uuid7(),
                registration_id=registration.id,
                event_entity_id=registration.event_id,
                attended=registration.attended,
            )
        )
        return Success(value=registration)
