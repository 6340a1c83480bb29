"""Registration listing query handlers.

Full-history reads: cancelled registrations are included and no ordering
is promised.
"""

from src.application.errors.failures import storage_failure
from src.application.queries.registration_queries import (
    ListRegistrationsByEvent,
    ListRegistrationsByUser,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.registration import Registration
from src.domain.protocols.registration_repository import RegistrationRepository


class ListRegistrationsByUserHandler:
    """Handler for ListRegistrationsByUser query."""

    def __init__(self, registration_repo: RegistrationRepository) -> None:
        self._registration_repo = registration_repo

    async def handle(
        self, query: ListRegistrationsByUser
    ) -> Result[list[Registration], DomainError]:
        try:
            registrations = await self._registration_repo.find_by_user_id(
                query.user_id
            )
        except Exception as e:
            return Failure(error=storage_failure("list user registrations", e))
        return Success(value=registrations)


class ListRegistrationsByEventHandler:
    """Handler for ListRegistrationsByEvent query."""

    def __init__(self, registration_repo: RegistrationRepository) -> None:
        self._registration_repo = registration_repo

    async def handle(
        self, query: ListRegistrationsByEvent
    ) -> Result[list[Registration], DomainError]:
        try:
            registrations = await self._registration_repo.find_by_event_id(
                query.event_id
            )
        except Exception as e:
            return Failure(error=storage_failure("list event registrations", e))
        return Success(value=registrations)
