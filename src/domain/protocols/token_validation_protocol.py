"""TokenValidationProtocol for access token validation.

Tokens are issued by an external identity service; this engine only
validates them and reads the subject and roles.
"""

from typing import Any, Protocol

from src.core.result import Result


class TokenValidationProtocol(Protocol):
    """Protocol for access token validation.

    Example:
        >>> class MyHandler:
        ...     def __init__(self, token_service: TokenValidationProtocol):
        ...         self._tokens = token_service
    """

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate an access token and return its claims.

        Args:
            token: Encoded token string.

        Returns:
            Success(claims) if signature and expiry are valid,
            Failure(error message) otherwise.
        """
        ...
