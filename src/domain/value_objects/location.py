"""Location value object.

Immutable description of where an event happens. Which fields are required
depends on the location type.
"""

from dataclasses import dataclass

from src.domain.enums.location_type import LocationType
from src.domain.errors.event_error import EventError


@dataclass(frozen=True)
class Location:
    """Event location with type-dependent validation.

    Attributes:
        type: PHYSICAL, ONLINE or HYBRID.
        address: Street address (physical/hybrid).
        city: City (physical/hybrid).
        country: Country, optional.
        virtual_link: Join URL (online/hybrid).

    Raises:
        ValueError: If a field required by the location type is missing.

    Example:
        >>> Location(type=LocationType.ONLINE, virtual_link="https://meet.example.com/x")
        >>> Location(type=LocationType.PHYSICAL, address="1 Main St")
        Traceback (most recent call last):
        ...
        ValueError: Event location is incomplete for its location type
    """

    type: LocationType
    address: str | None = None
    city: str | None = None
    country: str | None = None
    virtual_link: str | None = None

    def __post_init__(self) -> None:
        """Validate required fields for the location type.

        Raises:
            ValueError: If venue or virtual link fields are missing.
        """
        if self.type.requires_venue():
            if not _present(self.address) or not _present(self.city):
                raise ValueError(EventError.INVALID_LOCATION)
        if self.type.requires_virtual_link() and not _present(self.virtual_link):
            raise ValueError(EventError.INVALID_LOCATION)

    def is_virtual(self) -> bool:
        """Check if attendees can join remotely."""
        return self.type.requires_virtual_link()


def _present(value: str | None) -> bool:
    return value is not None and bool(value.strip())
