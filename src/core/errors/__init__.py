"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from src.core.errors import DomainError, NotFoundError, GoneError
"""

from src.core.errors.common_errors import (
    AuthorizationError,
    ConflictError,
    GoneError,
    InvalidTransitionError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "GoneError",
    "ConflictError",
    "InvalidTransitionError",
    "AuthorizationError",
    "StorageError",
]
