"""Repository dependency factories.

Request-scoped repository instances for domain entity persistence.
Each request gets fresh repository instances with shared session.

The backend is chosen by STORAGE_BACKEND:
    - database: SQLAlchemy repositories over the request session
    - memory: repositories over the process-wide InMemoryStore
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session, get_memory_store

if TYPE_CHECKING:
    from src.domain.protocols.event_repository import EventRepository
    from src.domain.protocols.registration_repository import (
        RegistrationRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_event_repository(
    session: AsyncSession | None = Depends(get_db_session),
) -> "EventRepository":
    """Get event repository (request-scoped).

    Args:
        session: Database session for request duration (None for memory backend).
            Injected via Depends(get_db_session).

    Returns:
        Repository implementing the EventRepository protocol.
    """
    if session is None:
        from src.infrastructure.persistence.repositories import (
            InMemoryEventRepository,
        )

        return InMemoryEventRepository(store=get_memory_store())

    from src.infrastructure.persistence.repositories import EventRepository

    return EventRepository(session=session)


async def get_registration_repository(
    session: AsyncSession | None = Depends(get_db_session),
) -> "RegistrationRepository":
    """Get registration repository (request-scoped).

    Args:
        session: Database session for request duration (None for memory backend).

    Returns:
        Repository implementing the RegistrationRepository protocol.
    """
    if session is None:
        from src.infrastructure.persistence.repositories import (
            InMemoryRegistrationRepository,
        )

        return InMemoryRegistrationRepository(store=get_memory_store())

    from src.infrastructure.persistence.repositories import RegistrationRepository

    return RegistrationRepository(session=session)
