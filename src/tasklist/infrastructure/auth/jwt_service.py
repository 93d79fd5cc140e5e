"""JWT token service.

Provides creation and validation of signed, time-limited access tokens.
The only trusted claim is the subject, which carries the user ID.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from tasklist.core.config import AuthConfig


class JWTError(Exception):
    """Base exception for JWT-related errors."""

    pass


class TokenExpiredError(JWTError):
    """Raised when a token has expired."""

    pass


class InvalidTokenError(JWTError):
    """Raised when a token is invalid."""

    pass


class JWTService:
    """Service for creating and validating JWT access tokens."""

    def __init__(self, config: AuthConfig) -> None:
        """Initialize the JWT service.

        Args:
            config: Authentication configuration holding the signing key,
                algorithm, issuer and token lifetime.
        """
        self._config = config

    def create_access_token(
        self,
        user_id: int,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create an access token.

        Args:
            user_id: The user's unique identifier.
            expires_delta: Custom expiration time. Defaults to the configured TTL.

        Returns:
            Encoded JWT access token.
        """
        if expires_delta is None:
            expires_delta = self._config.access_token_ttl

        now = datetime.now(timezone.utc)
        payload = {
            "iss": self._config.issuer,
            "sub": str(user_id),
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(payload, self._config.secret_key, algorithm=self._config.algorithm)

    def decode_token(self, token: str) -> dict[str, Any]:
        """Decode and validate a JWT token.

        Args:
            token: The encoded JWT token.

        Returns:
            Decoded token payload.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid.
        """
        try:
            return jwt.decode(
                token,
                self._config.secret_key,
                algorithms=[self._config.algorithm],
                issuer=self._config.issuer,
                options={"require": ["exp", "iat", "sub", "iss"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError("Invalid token") from e

    def verify(self, token: str) -> int:
        """Validate an access token and return the user ID it was issued for.

        Args:
            token: The encoded JWT token.

        Returns:
            The user ID from the ``sub`` claim.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid or its subject is not a user ID.
        """
        payload = self.decode_token(token)
        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise InvalidTokenError("Invalid subject claim") from e

    def get_expires_in(self) -> int:
        """Get the configured access token lifetime in seconds."""
        return int(self._config.access_token_ttl.total_seconds())
