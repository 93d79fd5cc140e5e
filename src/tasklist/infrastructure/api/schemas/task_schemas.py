"""Pydantic schemas for task endpoints."""

from pydantic import Field

from tasklist.infrastructure.api.schemas.base import CamelModel, UTCDateTime


class CreateTaskRequest(CamelModel):
    """Request body for creating a task.

    Owner and timestamp fields sent by the client are ignored.
    """

    title: str = Field(..., min_length=1, max_length=255, description="Task title")
    description: str | None = Field(None, description="Task description")


class UpdateTaskRequest(CamelModel):
    """Request body for updating a task.

    The title is always replaced. The description is replaced only when
    present in the body.
    """

    title: str = Field(..., min_length=1, max_length=255, description="Task title")
    description: str | None = Field(None, description="Task description")


class TaskResponse(CamelModel):
    """Task as returned by the API."""

    id: int = Field(..., description="Task ID")
    title: str = Field(..., description="Task title")
    description: str | None = Field(None, description="Task description")
    user_id: int = Field(..., description="Owning user ID")
    created_at: UTCDateTime = Field(..., description="When the task was created")
    updated_at: UTCDateTime = Field(..., description="When the task was last updated")
