"""EventRepository - SQLAlchemy implementation of EventRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Event entities and database EventModel.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.event import Event
from src.domain.enums.event_category import EventCategory
from src.domain.enums.event_status import EventStatus
from src.domain.enums.location_type import LocationType
from src.domain.value_objects.location import Location
from src.infrastructure.persistence.models.event import Event as EventModel
from src.infrastructure.persistence.repositories._timestamps import (
    as_utc,
    as_utc_optional,
)

_CANCELLED = EventStatus.CANCELLED.value


class EventRepository:
    """SQLAlchemy implementation of EventRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = EventRepository(session)
        ...     event = await repo.find_by_id(event_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(
        self, event_id: UUID, *, for_update: bool = False
    ) -> Event | None:
        """Find event by ID, including cancelled events.

        Args:
            event_id: Event's unique identifier.
            for_update: Emit SELECT ... FOR UPDATE (no-op on SQLite).

        Returns:
            Domain Event entity if found, None otherwise.
        """
        stmt = select(EventModel).where(EventModel.id == event_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_visible(self, offset: int, limit: int) -> list[Event]:
        """Find non-cancelled events, earliest start first."""
        stmt = (
            select(EventModel)
            .where(EventModel.status != _CANCELLED)
            .order_by(EventModel.start_at.asc(), EventModel.id.asc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def count_visible(self) -> int:
        """Count non-cancelled events."""
        stmt = (
            select(func.count())
            .select_from(EventModel)
            .where(EventModel.status != _CANCELLED)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_visible_by_organizer(
        self, organizer_id: UUID, offset: int, limit: int
    ) -> list[Event]:
        """Find an organizer's non-cancelled events, earliest start first."""
        stmt = (
            select(EventModel)
            .where(
                EventModel.organizer_id == organizer_id,
                EventModel.status != _CANCELLED,
            )
            .order_by(EventModel.start_at.asc(), EventModel.id.asc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def count_visible_by_organizer(self, organizer_id: UUID) -> int:
        """Count an organizer's non-cancelled events."""
        stmt = (
            select(func.count())
            .select_from(EventModel)
            .where(
                EventModel.organizer_id == organizer_id,
                EventModel.status != _CANCELLED,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_pending_cancellation(self) -> list[Event]:
        """Find events with a cancellation marker that are not yet CANCELLED."""
        stmt = (
            select(EventModel)
            .where(
                EventModel.cancellation_requested_at.is_not(None),
                EventModel.status != _CANCELLED,
            )
            .order_by(EventModel.cancellation_requested_at.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, event: Event) -> None:
        """Create or update event in database.

        Uses merge semantics - creates if not exists, updates if exists.
        Each save commits.

        Args:
            event: Event entity to persist.
        """
        stmt = select(EventModel).where(EventModel.id == event.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self.session.add(self._to_model(event))
        else:
            self._update_model(existing, event)

        await self.session.commit()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: EventModel) -> Event:
        """Convert database model to domain entity.

        Reconstructs the Location value object from its columns and converts
        string columns to enums.
        """
        return Event(
            id=model.id,
            organizer_id=model.organizer_id,
            title=model.title,
            description=model.description,
            category=EventCategory(model.category),
            start_at=as_utc(model.start_at),
            end_at=as_utc(model.end_at),
            location=Location(
                type=LocationType(model.location_type),
                address=model.address,
                city=model.city,
                country=model.country,
                virtual_link=model.virtual_link,
            ),
            capacity=model.capacity,
            registration_deadline=as_utc(model.registration_deadline),
            status=EventStatus(model.status),
            tags=list(model.tags or []),
            image_url=model.image_url,
            requirements=model.requirements,
            agenda=model.agenda,
            cancellation_requested_at=as_utc_optional(model.cancellation_requested_at),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: Event) -> EventModel:
        """Convert domain entity to database model."""
        model = EventModel(id=entity.id)
        self._update_model(model, entity)
        model.created_at = entity.created_at
        return model

    def _update_model(self, model: EventModel, entity: Event) -> None:
        """Copy every mutable field from entity to model."""
        model.organizer_id = entity.organizer_id
        model.title = entity.title
        model.description = entity.description
        model.category = entity.category.value
        model.start_at = entity.start_at
        model.end_at = entity.end_at
        model.location_type = entity.location.type.value
        model.address = entity.location.address
        model.city = entity.location.city
        model.country = entity.location.country
        model.virtual_link = entity.location.virtual_link
        model.capacity = entity.capacity
        model.registration_deadline = entity.registration_deadline
        model.status = entity.status.value
        model.tags = list(entity.tags)
        model.image_url = entity.image_url
        model.requirements = entity.requirements
        model.agenda = entity.agenda
        model.cancellation_requested_at = entity.cancellation_requested_at
        model.updated_at = entity.updated_at
