"""Event categories shown in listings and filters."""

from enum import Enum


class EventCategory(str, Enum):
    """Event category classification."""

    CONFERENCE = "conference"
    WORKSHOP = "workshop"
    WEBINAR = "webinar"
    SOCIAL = "social"
    SPORTS = "sports"
