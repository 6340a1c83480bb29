"""Domain value objects."""

from src.domain.value_objects.location import Location

__all__ = ["Location"]
