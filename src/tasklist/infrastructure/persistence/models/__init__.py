"""SQLAlchemy models for Tasklist tables.

All models inherit from the Base class defined in database.py and are
created on application startup in development mode.
"""

from tasklist.infrastructure.persistence.models.task import TaskModel
from tasklist.infrastructure.persistence.models.user import UserModel

__all__ = [
    "TaskModel",
    "UserModel",
]
