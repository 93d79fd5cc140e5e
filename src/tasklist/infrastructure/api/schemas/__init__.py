"""API Schemas for request/response validation."""

from tasklist.infrastructure.api.schemas.auth_schemas import (
    LoginRequest,
    MessageResponse,
    SignUpRequest,
    TokenResponse,
)
from tasklist.infrastructure.api.schemas.error_schemas import (
    ErrorResponse,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from tasklist.infrastructure.api.schemas.task_schemas import (
    CreateTaskRequest,
    TaskResponse,
    UpdateTaskRequest,
)
from tasklist.infrastructure.api.schemas.user_schemas import (
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "CreateTaskRequest",
    "ErrorResponse",
    "LoginRequest",
    "MessageResponse",
    "SignUpRequest",
    "TaskResponse",
    "TokenResponse",
    "UpdateTaskRequest",
    "UpdateUserRequest",
    "UserResponse",
    "ValidationErrorDetail",
    "ValidationErrorResponse",
]
