"""Persistence repositories for database operations."""

from tasklist.infrastructure.persistence.repositories.task_repository import (
    TaskRepository,
)
from tasklist.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "TaskRepository",
    "UserRepository",
]
