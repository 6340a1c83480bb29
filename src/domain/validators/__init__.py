"""Validators package exports."""

from src.domain.validators.functions import (
    validate_future_datetime,
    validate_non_blank,
    validate_tags,
)

__all__ = [
    "validate_future_datetime",
    "validate_non_blank",
    "validate_tags",
]
