"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere.
All custom types use Pydantic's Annotated with Field constraints and AfterValidator.

Usage:
    from src.domain.types import Capacity, EventTitle, FutureDatetime

    class CreateEventRequest(BaseModel):
        title: EventTitle  # Validation included!
        capacity: Capacity
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_future_datetime,
    validate_non_blank,
    validate_tags,
)

# ============================================================================
# Event Types
# ============================================================================

EventTitle = Annotated[
    str,
    Field(
        min_length=1,
        max_length=200,
        description="Event title",
        examples=["Python Meetup"],
    ),
    AfterValidator(validate_non_blank),
]
"""Non-blank event title (whitespace stripped)."""

EventDescription = Annotated[
    str,
    Field(
        min_length=1,
        max_length=5000,
        description="Event description",
    ),
    AfterValidator(validate_non_blank),
]

Capacity = Annotated[
    int,
    Field(ge=1, description="Maximum confirmed registrations", examples=[50]),
]
"""Positive event capacity.

Examples:
    >>> class EventCreate(BaseModel):
    ...     capacity: Capacity
    >>> EventCreate(capacity=0)  # ValidationError
"""

FutureDatetime = Annotated[
    datetime,
    AfterValidator(validate_future_datetime),
]
"""Timestamp that must lie in the future at submission time (normalized to UTC)."""

Tags = Annotated[
    list[str],
    Field(default_factory=list, max_length=20, description="Free-form labels"),
    AfterValidator(validate_tags),
]

# ============================================================================
# Registration Types
# ============================================================================

RegistrationNotes = Annotated[
    str | None,
    Field(default=None, max_length=1000, description="Free-text notes"),
]
