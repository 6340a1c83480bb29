"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL / SQLite)
- In-memory store (STORAGE_BACKEND=memory)
- Token validation (JWT)
- Admission lock (per-event)
- Logging (console)

Request-scoped:
- Database session
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.admission_lock_protocol import AdmissionLockProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.token_validation_protocol import (
        TokenValidationProtocol,
    )
    from src.infrastructure.persistence.repositories import InMemoryStore


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_memory_store() -> "InMemoryStore":
    """Get the process-wide in-memory store (STORAGE_BACKEND=memory).

    Returns:
        InMemoryStore shared by all in-memory repositories.
    """
    from src.infrastructure.persistence.repositories import InMemoryStore

    return InMemoryStore()


@lru_cache()
def get_token_service() -> "TokenValidationProtocol":
    """Get JWT token validation service singleton (app-scoped).

    Returns:
        Token validation service implementing TokenValidationProtocol.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_admission_lock() -> "AdmissionLockProtocol":
    """Get the per-event admission lock singleton (app-scoped).

    One instance per process; every RegisterForEvent and PromoteWaitlist
    handler must share it for admission to be serialized.
    """
    from src.infrastructure.concurrency import InMemoryAdmissionLock

    return InMemoryAdmissionLock()


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.is_testing or settings.is_ci
    return ConsoleAdapter(
        use_json=use_json,
        level=settings.log_level,
        service=settings.app_name,
        environment=settings.environment.value,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession | None, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields None when STORAGE_BACKEND=memory (no database involved).

    Yields:
        Database session for request duration.
    """
    if settings.storage_backend == "memory":
        yield None
        return

    db = get_database()
    async with db.get_session() as session:
        yield session
