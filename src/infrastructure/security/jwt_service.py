"""JWT token service (adapter).

This service implements the TokenValidationProtocol using PyJWT.

Architecture:
    - Implements TokenValidationProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - HMAC algorithms (HS256 default)
    - 256-bit secret key minimum
    - Expiration (exp) and subject (sub) claims required

Tokens are issued by the identity service that fronts this API; only
validation lives here.
"""

from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError

from src.core.result import Failure, Result, Success

INVALID_TOKEN = "Invalid or expired access token"


class JWTService:
    """JWT access token validation service.

    Usage:
        from src.core.container import get_token_service

        result = get_token_service().validate_access_token(token)
        match result:
            case Success(value=claims):
                user_id = claims["sub"]
            case Failure(error=error):
                ...
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256") -> None:
        """Initialize JWT service.

        Args:
            secret_key: Shared secret used to verify signatures.
                MUST be at least 256 bits (32 bytes).
            algorithm: JWT signing algorithm (default: HS256).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate JWT access token and extract payload.

        Args:
            token: JWT access token string to validate.

        Returns:
            Result with payload dict if valid, or error string if invalid.
        """
        try:
            # PyJWT verifies signature and exp; sub must be present
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except InvalidTokenError:
            return Failure(error=INVALID_TOKEN)

        return Success(value=payload)
