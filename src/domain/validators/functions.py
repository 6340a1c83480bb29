"""Centralized validation functions (DRY principle).

All boundary validation logic defined once, reused by request schemas via
the Annotated types in src.domain.types. Validators are pure functions that
raise ValueError on validation failure.
"""

from datetime import UTC, datetime


def validate_non_blank(v: str) -> str:
    """Validate that a text field has visible content.

    Args:
        v: Text to validate.

    Returns:
        Text with surrounding whitespace stripped.

    Raises:
        ValueError: If text is empty or whitespace only.

    Example:
        >>> validate_non_blank("  Meetup ")
        'Meetup'
        >>> validate_non_blank("   ")
        ValueError: Value cannot be blank
    """
    stripped = v.strip()
    if not stripped:
        raise ValueError("Value cannot be blank")
    return stripped


def validate_future_datetime(v: datetime) -> datetime:
    """Validate that a timestamp is timezone-aware and in the future.

    Naive timestamps are interpreted as UTC.

    Args:
        v: Timestamp to validate.

    Returns:
        Timestamp normalized to UTC.

    Raises:
        ValueError: If timestamp is not after the current time.
    """
    if v.tzinfo is None:
        v = v.replace(tzinfo=UTC)
    v = v.astimezone(UTC)
    if v <= datetime.now(UTC):
        raise ValueError("Timestamp must be in the future")
    return v


def validate_tags(v: list[str]) -> list[str]:
    """Normalize tags: strip whitespace, drop blanks, keep first occurrence.

    Example:
        >>> validate_tags([" python", "python", "", "web "])
        ['python', 'web']
    """
    seen: list[str] = []
    for tag in v:
        cleaned = tag.strip()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen
