"""Authentication infrastructure components.

This module provides password hashing, JWT token services and the
identity guard that resolves bearer tokens to users.
"""

from tasklist.infrastructure.auth.identity_guard import (
    AuthenticationError,
    CurrentUser,
    IdentityGuard,
    extract_bearer_token,
)
from tasklist.infrastructure.auth.jwt_service import (
    InvalidTokenError,
    JWTError,
    JWTService,
    TokenExpiredError,
)
from tasklist.infrastructure.auth.password_hasher import PasswordHasher

__all__ = [
    "AuthenticationError",
    "CurrentUser",
    "IdentityGuard",
    "InvalidTokenError",
    "JWTError",
    "JWTService",
    "PasswordHasher",
    "TokenExpiredError",
    "extract_bearer_token",
]
