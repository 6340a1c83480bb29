"""Repository implementations (adapters).

- EventRepository / RegistrationRepository: SQLAlchemy (async)
- InMemoryEventRepository / InMemoryRegistrationRepository: single process
"""

from src.infrastructure.persistence.repositories.event_repository import (
    EventRepository,
)
from src.infrastructure.persistence.repositories.in_memory import (
    InMemoryEventRepository,
    InMemoryRegistrationRepository,
    InMemoryStore,
)
from src.infrastructure.persistence.repositories.registration_repository import (
    RegistrationRepository,
)

__all__ = [
    "EventRepository",
    "InMemoryEventRepository",
    "InMemoryRegistrationRepository",
    "InMemoryStore",
    "RegistrationRepository",
]
