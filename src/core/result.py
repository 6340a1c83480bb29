"""Result types for railway-oriented programming.

Every engine operation returns a Result instead of raising. Callers branch on
the concrete type (or pattern-match) and translate failures at the edge.

Usage:
    result = await handler.handle(RegisterForEvent(user_id=..., event_id=...))
    match result:
        case Success(value=registration):
            print(registration.status)
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
