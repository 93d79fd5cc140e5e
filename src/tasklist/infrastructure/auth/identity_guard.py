"""Identity guard for bearer-token authentication.

Resolves the ``Authorization: Bearer <token>`` header of a request to a
persisted user. Token verification alone is not enough: the user must
still exist, which is the only way a token stops working before expiry.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.core.logging import get_logger
from tasklist.infrastructure.auth.jwt_service import (
    InvalidTokenError,
    JWTService,
    TokenExpiredError,
)
from tasklist.infrastructure.persistence.models import UserModel
from tasklist.infrastructure.persistence.repositories import UserRepository

logger = get_logger(__name__)


class AuthenticationError(Exception):
    """Raised when a request cannot be tied to a known user."""

    pass


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated user attached to a request.

    Carries everything handlers may need about the caller except the
    password hash.
    """

    id: int
    email: str
    nick_name: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, user: UserModel) -> "CurrentUser":
        """Build a CurrentUser from a user row."""
        return cls(
            id=user.id,
            email=user.email,
            nick_name=user.nick_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


def extract_bearer_token(headers: Mapping[str, str]) -> str:
    """Extract the bearer token from request headers.

    Args:
        headers: Request headers (case-insensitive mapping).

    Returns:
        The raw token string.

    Raises:
        AuthenticationError: If the header is missing or not a Bearer credential.
    """
    authorization = headers.get("authorization")
    if authorization is None:
        raise AuthenticationError("Missing Authorization header")

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError("Invalid Authorization header format")
    return parts[1]


class IdentityGuard:
    """Authenticate requests against the token service and the user table."""

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize the guard.

        Args:
            jwt_service: Service used to verify access tokens.
        """
        self.jwt_service = jwt_service

    async def authenticate(
        self, headers: Mapping[str, str], session: AsyncSession
    ) -> CurrentUser:
        """Authenticate a request from its headers.

        Args:
            headers: Request headers.
            session: Database session used to load the user.

        Returns:
            CurrentUser: The resolved user, without password hash.

        Raises:
            AuthenticationError: If the token is missing, malformed, expired,
                invalid, or its user no longer exists.
        """
        token = extract_bearer_token(headers)

        try:
            user_id = self.jwt_service.verify(token)
        except TokenExpiredError as e:
            raise AuthenticationError("Token has expired") from e
        except InvalidTokenError as e:
            raise AuthenticationError("Invalid token") from e

        user = await UserRepository(session).get_by_id(user_id)
        if user is None:
            logger.warning("Token subject no longer exists", user_id=user_id)
            raise AuthenticationError("User not found")

        return CurrentUser.from_model(user)
