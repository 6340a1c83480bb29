"""CancelRegistration command handler.

The only authorization rule the engine enforces itself: a registration can
be cancelled only by the user it belongs to, whatever their role.
Cancelling twice succeeds silently. A freed confirmed slot is not
handed to the waitlist automatically.
"""

from uuid_extensions import uuid7

from src.application.commands.registration_commands import CancelRegistration
from src.application.errors.failures import registration_not_found, storage_failure
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.registration import Registration
from src.domain.errors import RegistrationError
from src.domain.events.registration_events import RegistrationCancelled
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.registration_repository import RegistrationRepository


class CancelRegistrationHandler:
    """Handler for CancelRegistration command.

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
        self, cmd: CancelRegistration
    ) -> Result[Registration, DomainError]:
        """Handle CancelRegistration command.

        Returns:
            Success(Registration): Registration is CANCELLED.
            Failure(NotFoundError): Registration does not exist.
            Failure(AuthorizationError): Actor is not the registration's user.
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

        if not registration.belongs_to(cmd.acting_user_id):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.REGISTRATION_NOT_OWNED,
                    message=RegistrationError.NOT_OWNER,
                    required_permission="registration_owner",
                )
            )

        if not registration.cancel():
            # Already cancelled
            return Success(value=registration)

        try:
            await self._registration_repo.save(registration)
        except Exception as e:
            return Failure(error=storage_failure("save registration", e))

        await self._event_bus.publish(
            RegistrationCancelled(
                event_id=uuid7(),
                registration_id=registration.id,
                event_entity_id=registration.event_id,
                user_id=registration.user_id,
            )
        )
        return Success(value=registration)
