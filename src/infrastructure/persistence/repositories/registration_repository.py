"""RegistrationRepository - SQLAlchemy implementation of RegistrationRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Registration entities and database RegistrationModel.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.registration import Registration
from src.domain.enums.registration_status import RegistrationStatus
from src.infrastructure.persistence.models.registration import (
    Registration as RegistrationModel,
)
from src.infrastructure.persistence.repositories._timestamps import as_utc


class RegistrationRepository:
    """SQLAlchemy implementation of RegistrationRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, registration_id: UUID) -> Registration | None:
        """Find registration by ID."""
        stmt = select(RegistrationModel).where(RegistrationModel.id == registration_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_event_id(self, event_id: UUID) -> list[Registration]:
        """Find all registrations for an event (any status)."""
        stmt = select(RegistrationModel).where(RegistrationModel.event_id == event_id)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_user_id(self, user_id: UUID) -> list[Registration]:
        """Find all registrations for a user (any status)."""
        stmt = select(RegistrationModel).where(RegistrationModel.user_id == user_id)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_active(
        self, event_id: UUID, user_id: UUID
    ) -> Registration | None:
        """Find the user's non-cancelled registration for an event."""
        stmt = select(RegistrationModel).where(
            RegistrationModel.event_id == event_id,
            RegistrationModel.user_id == user_id,
            RegistrationModel.status != RegistrationStatus.CANCELLED.value,
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._to_domain(model)

    async def count_by_event_and_status(
        self, event_id: UUID, status: RegistrationStatus
    ) -> int:
        """Count an event's registrations with the given status."""
        stmt = (
            select(func.count())
            .select_from(RegistrationModel)
            .where(
                RegistrationModel.event_id == event_id,
                RegistrationModel.status == status.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_event_and_status(
        self, event_id: UUID, status: RegistrationStatus
    ) -> list[Registration]:
        """Find an event's registrations with the given status, oldest first."""
        stmt = (
            select(RegistrationModel)
            .where(
                RegistrationModel.event_id == event_id,
                RegistrationModel.status == status.value,
            )
            .order_by(
                RegistrationModel.registration_date.asc(),
                RegistrationModel.id.asc(),
            )
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, registration: Registration) -> None:
        """Create or update registration in database.

        Uses merge semantics - creates if not exists, updates if exists.
        Each save commits.

        Raises:
            IntegrityError: A second active registration for the same
                (event, user) pair. The session is rolled back first so it
                stays usable.
        """
        stmt = select(RegistrationModel).where(RegistrationModel.id == registration.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self.session.add(self._to_model(registration))
        else:
            self._update_model(existing, registration)

        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: RegistrationModel) -> Registration:
        return Registration(
            id=model.id,
            event_id=model.event_id,
            user_id=model.user_id,
            status=RegistrationStatus(model.status),
            registration_date=as_utc(model.registration_date),
            notes=model.notes,
            attended=model.attended,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: Registration) -> RegistrationModel:
        return RegistrationModel(
            id=entity.id,
            event_id=entity.event_id,
            user_id=entity.user_id,
            status=entity.status.value,
            registration_date=entity.registration_date,
            notes=entity.notes,
            attended=entity.attended,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _update_model(self, model: RegistrationModel, entity: Registration) -> None:
        model.status = entity.status.value
        model.notes = entity.notes
        model.attended = entity.attended
        model.updated_at = entity.updated_at
