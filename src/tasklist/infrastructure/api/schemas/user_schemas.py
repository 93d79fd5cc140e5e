"""Pydantic schemas for the user profile endpoints."""

from pydantic import Field

from tasklist.infrastructure.api.schemas.base import CamelModel, UTCDateTime


class UpdateUserRequest(CamelModel):
    """Request body for updating the caller's profile."""

    nick_name: str | None = Field(None, max_length=255, description="Display name")


class UserResponse(CamelModel):
    """User profile. Never includes the password hash."""

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    nick_name: str | None = Field(None, description="Display name")
    created_at: UTCDateTime = Field(..., description="When the user was created")
    updated_at: UTCDateTime = Field(..., description="When the user was last updated")
