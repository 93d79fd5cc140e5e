"""FastAPI dependencies for authentication and services.

The identity guard middleware authenticates the request before routing;
these dependencies hand its result and the app-wide auth components to
route handlers.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.domain.services import AuthService, TaskService, UserService
from tasklist.infrastructure.auth import CurrentUser, JWTService, PasswordHasher
from tasklist.infrastructure.persistence.database import get_db_session

# Documents the bearer scheme in OpenAPI. The middleware does the checking.
bearer_scheme = HTTPBearer(scheme_name="jwt", bearerFormat="JWT", auto_error=False)
BearerAuth = Security(bearer_scheme)


def get_current_user(request: Request) -> CurrentUser:
    """Return the user resolved by the identity guard.

    Raises:
        HTTPException: 401 if the request was not authenticated.
    """
    current_user = getattr(request.state, "current_user", None)
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user


def get_password_hasher(request: Request) -> PasswordHasher:
    """Get the password hasher from app state."""
    return request.app.state.password_hasher


def get_jwt_service(request: Request) -> JWTService:
    """Get the JWT service from app state."""
    return request.app.state.jwt_service


# Type aliases for dependency injection
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_auth_service(
    session: DbSession,
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
) -> AuthService:
    """Build an AuthService for the current request."""
    return AuthService(session, password_hasher, jwt_service)


def get_task_service(session: DbSession) -> TaskService:
    """Build a TaskService for the current request."""
    return TaskService(session)


def get_user_service(session: DbSession) -> UserService:
    """Build a UserService for the current request."""
    return UserService(session)
