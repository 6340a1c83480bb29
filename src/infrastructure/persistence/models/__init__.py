"""Database models.

Importing this package registers every table on BaseModel.metadata
(used by Alembic autogenerate and Database.create_all).
"""

from src.infrastructure.persistence.models.event import Event
from src.infrastructure.persistence.models.registration import Registration

__all__ = ["Event", "Registration"]
