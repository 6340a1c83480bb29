"""Application layer errors."""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = ["ApplicationError", "ApplicationErrorCode"]
