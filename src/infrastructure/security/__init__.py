"""Security infrastructure adapters.

- JWT access token validation
"""

from src.infrastructure.security.jwt_service import INVALID_TOKEN, JWTService

__all__ = [
    "INVALID_TOKEN",
    "JWTService",
]
