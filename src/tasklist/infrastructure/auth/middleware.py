"""Identity guard middleware.

Runs the IdentityGuard in front of every protected route. A request that
fails authentication is answered with 401 here and never reaches a
handler; a request that passes carries ``request.state.current_user``.
"""

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from tasklist.core.logging import bind_user_id, get_logger
from tasklist.infrastructure.auth.identity_guard import AuthenticationError, IdentityGuard

logger = get_logger(__name__)

PUBLIC_PATHS = frozenset(
    {
        "/auth/signup",
        "/auth/login",
        "/health",
        "/ready",
        "/docs",
        "/docs/oauth2-redirect",
        "/redoc",
        "/openapi.json",
    }
)


def is_public_path(path: str) -> bool:
    """Check whether a path is reachable without a bearer token."""
    return path.rstrip("/") in PUBLIC_PATHS or path == "/"


class IdentityGuardMiddleware(BaseHTTPMiddleware):
    """Middleware that authenticates every non-public request."""

    def __init__(self, app: ASGIApp, guard: IdentityGuard) -> None:
        super().__init__(app)
        self.guard = guard

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Authenticate the request or short-circuit with 401.

        Args:
            request: The incoming request.
            call_next: The next middleware/endpoint to call.

        Returns:
            The response from the application, or a 401 response.
        """
        if request.method == "OPTIONS" or is_public_path(request.url.path):
            return await call_next(request)

        db = request.app.state.db
        try:
            async with db.session() as session:
                current_user = await self.guard.authenticate(request.headers, session)
        except AuthenticationError as e:
            logger.info(
                "Authentication failed",
                reason=str(e),
                path=request.url.path,
            )
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"error": "Unauthorized", "message": str(e)},
                headers={"WWW-Authenticate": "Bearer"},
            )

        request.state.current_user = current_user
        bind_user_id(current_user.id)
        return await call_next(request)
