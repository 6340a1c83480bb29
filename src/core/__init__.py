"""Core shared kernel.

Foundational pieces used across all architectural layers:
- Result types for railway-oriented programming
- Typed error values (NotFound, Conflict, Forbidden, Gone, StorageFailure)
- Settings and the dependency container

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthorizationError,
    ConflictError,
    DomainError,
    GoneError,
    InvalidTransitionError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "GoneError",
    "InvalidTransitionError",
    "NotFoundError",
    "Result",
    "StorageError",
    "Success",
    "ValidationError",
]
