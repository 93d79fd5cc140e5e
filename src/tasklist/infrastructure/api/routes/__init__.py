"""API Routes for Tasklist."""

from tasklist.infrastructure.api.routes.auth_router import router as auth_router
from tasklist.infrastructure.api.routes.todo_router import router as todo_router
from tasklist.infrastructure.api.routes.user_router import router as user_router

__all__ = [
    "auth_router",
    "todo_router",
    "user_router",
]
