"""User profile API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from tasklist.domain.services import UserService
from tasklist.infrastructure.api.dependencies import (
    AuthenticatedUser,
    BearerAuth,
    get_user_service,
)
from tasklist.infrastructure.api.schemas import (
    ErrorResponse,
    UpdateUserRequest,
    UserResponse,
)

router = APIRouter(
    dependencies=[BearerAuth],
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)


@router.get("", response_model=UserResponse)
async def get_login_user(current_user: AuthenticatedUser) -> UserResponse:
    """Return the caller's profile."""
    return UserResponse.model_validate(current_user)


@router.patch("", response_model=UserResponse)
async def update_user(
    request: UpdateUserRequest,
    current_user: AuthenticatedUser,
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Update the caller's display name."""
    user = await user_service.update_user(
        current_user.id,
        nick_name=request.nick_name,
        update_nick_name="nick_name" in request.model_fields_set,
    )
    return UserResponse.model_validate(user)
