"""Domain services for Tasklist.

Services hold the business rules and work on top of the persistence
repositories.
"""

from tasklist.domain.services.auth_service import SIGNUP_SUCCESS_MESSAGE, AuthService
from tasklist.domain.services.task_service import TaskService
from tasklist.domain.services.user_service import UserService

__all__ = [
    "SIGNUP_SUCCESS_MESSAGE",
    "AuthService",
    "TaskService",
    "UserService",
]
