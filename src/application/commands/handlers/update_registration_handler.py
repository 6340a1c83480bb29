"""UpdateRegistration command handler.

Organizer/admin edit of a registration's status and notes. The
registration transition table is enforced: nothing leaves CANCELLED, but
notes on a cancelled registration may still be rewritten.
"""

from uuid_extensions import uuid7

from src.application.commands.registration_commands import UpdateRegistration
from src.application.errors.failures import (
    invalid_transition,
    registration_not_found,
    storage_failure,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.registration import Registration
from src.domain.events.registration_events import RegistrationStatusChanged
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.registration_repository import RegistrationRepository


class UpdateRegistrationHandler:
    """Handler for UpdateRegistration command.

    Dependencies (injected via constructor):
        - RegistrationRepository: For persistence
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        registration_repo: RegistrationRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._registration_repo = registration_repo
        self._event_bus = event_bus

    async def handle(
        self, cmd: UpdateRegistration
    ) -> Result[Registration, DomainError]:
        """Handle UpdateRegistration command.

        Returns:
            Success(Registration): Updated registration.
            Failure(NotFoundError): Registration does not exist.
            Failure(InvalidTransitionError): Edge not allowed.
            Failure(StorageError): Read or write failed.
        """
        try:
            registration = await self._registration_repo.find_by_id(
                cmd.registration_id
            )
        except Exception as e:
            return Failure(error=storage_failure("load registration", e))

        if registration is None:
            return Failure(error=registration_not_found(cmd.registration_id))

        old_status = registration.status
        result = registration.update(cmd.status, cmd.notes)
        if isinstance(result, Failure):
            return Failure(
                error=invalid_transition(
                    "Registration",
                    result.error,
                    old_status.value,
                    cmd.status.value,
                )
            )

        try:
            await self._registration_repo.save(registration)
        except Exception as e:
            return Failure(error=storage_failure("save registration", e))

        if old_status != registration.status:
            await self._event_bus.publish(
                RegistrationStatusChanged(
                    event_id=uuid7(),
                    registration_id=registration.id,
                    event_entity_id=registration.event_id,
                    old_status=old_status,
                    new_status=registration.status,
                )
            )
        return Success(value=registration)
