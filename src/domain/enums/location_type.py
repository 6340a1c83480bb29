"""Where an event takes place.

- PHYSICAL: Venue only (address and city required)
- ONLINE: Virtual only (virtual link required)
- HYBRID: Both venue and virtual link required
"""

from enum import Enum


class LocationType(str, Enum):
    """Event location type."""

    PHYSICAL = "physical"
    ONLINE = "online"
    HYBRID = "hybrid"

    def requires_venue(self) -> bool:
        """Check if an address and city are required."""
        return self in (LocationType.PHYSICAL, LocationType.HYBRID)

    def requires_virtual_link(self) -> bool:
        """Check if a virtual link is required."""
        return self in (LocationType.ONLINE, LocationType.HYBRID)
