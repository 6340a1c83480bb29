"""Dashboard projection query handlers.

Pairs each of a user's registrations with its event, recomputed on every
request (no caching). A pair is dropped when its event cannot be resolved
or is CANCELLED.

- Active projection: CONFIRMED and WAITLISTED registrations
- Confirmed projection: CONFIRMED registrations only
"""

from collections.abc import Callable
from uuid import UUID

from src.application.dtos.registration_dtos import RegistrationWithEvent
from src.application.errors.failures import storage_failure
from src.application.queries.registration_queries import (
    ListActiveRegistrationsWithEvent,
    ListConfirmedRegistrationsWithEvent,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.event import Event
from src.domain.entities.registration import Registration
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.registration_repository import RegistrationRepository


class RegistrationProjector:
    """Builds (registration, event) pairs for one user.

    Dependencies (injected via constructor):
        - RegistrationRepository: The user's registrations
        - EventRepository: Resolves each registration's event
    """

    def __init__(
        self,
        registration_repo: RegistrationRepository,
        event_repo: EventRepository,
    ) -> None:
        self._registration_repo = registration_repo
        self._event_repo = event_repo

    async def project(
        self,
        user_id: UUID,
        include: Callable[[Registration], bool],
    ) -> Result[list[RegistrationWithEvent], DomainError]:
        """Pair the user's matching registrations with their visible events.

        Args:
            user_id: Registrations owner.
            include: Registration filter applied before resolving events.

        Returns:
            Success(list[RegistrationWithEvent]): Pairs with visible events.
            Failure(StorageError): Read failed.
        """
        try:
            registrations = await self._registration_repo.find_by_user_id(user_id)
            events: dict[UUID, Event | None] = {}
            pairs: list[RegistrationWithEvent] = []
            for registration in registrations:
                if not include(registration):
                    continue
                if registration.event_id not in events:
                    events[registration.event_id] = await self._event_repo.find_by_id(
                        registration.event_id
                    )
                event = events[registration.event_id]
                if event is None or event.is_cancelled():
                    continue
                pairs.append(RegistrationWithEvent(registration=registration, event=event))
        except Exception as e:
            return Failure(error=storage_failure("project registrations", e))

        return Success(value=pairs)


class ListActiveRegistrationsWithEventHandler:
    """Handler for ListActiveRegistrationsWithEvent query."""

    def __init__(self, projector: RegistrationProjector) -> None:
        self._projector = projector

    async def handle(
        self, query: ListActiveRegistrationsWithEvent
    ) -> Result[list[RegistrationWithEvent], DomainError]:
        return await self._projector.project(
            query.user_id, lambda registration: registration.is_active()
        )


class ListConfirmedRegistrationsWithEventHandler:
    """Handler for ListConfirmedRegistrationsWithEvent query."""

    def __init__(self, projector: RegistrationProjector) -> None:
        self._projector = projector

    async def handle(
        self, query: ListConfirmedRegistrationsWithEvent
    ) -> Result[list[RegistrationWithEvent], DomainError]:
        return await self._projector.project(
            query.user_id, lambda registration: registration.is_confirmed()
        )
