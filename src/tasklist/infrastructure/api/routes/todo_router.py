"""Task API routes.

All endpoints act on the authenticated user's own tasks only.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from tasklist.domain.services import TaskService
from tasklist.infrastructure.api.dependencies import (
    AuthenticatedUser,
    BearerAuth,
    get_task_service,
)
from tasklist.infrastructure.api.schemas import (
    CreateTaskRequest,
    ErrorResponse,
    TaskResponse,
    UpdateTaskRequest,
)

router = APIRouter(
    dependencies=[BearerAuth],
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)

TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]


@router.get("", response_model=list[TaskResponse])
async def get_tasks(
    current_user: AuthenticatedUser,
    task_service: TaskServiceDep,
) -> list[TaskResponse]:
    """List the caller's tasks."""
    tasks = await task_service.list_tasks(current_user.id)
    return [TaskResponse.model_validate(task) for task in tasks]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    responses={404: {"model": ErrorResponse, "description": "Task not found"}},
)
async def get_task_by_id(
    task_id: int,
    current_user: AuthenticatedUser,
    task_service: TaskServiceDep,
) -> TaskResponse:
    """Get one of the caller's tasks."""
    task = await task_service.get_task(current_user.id, task_id)
    return TaskResponse.model_validate(task)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TaskResponse)
async def create_task(
    request: CreateTaskRequest,
    current_user: AuthenticatedUser,
    task_service: TaskServiceDep,
) -> TaskResponse:
    """Create a task owned by the caller."""
    task = await task_service.create_task(
        current_user.id, request.title, request.description
    )
    return TaskResponse.model_validate(task)


@router.patch(
    "/{task_id}",
    response_model=TaskResponse,
    responses={404: {"model": ErrorResponse, "description": "Task not found"}},
)
async def update_task_by_id(
    task_id: int,
    request: UpdateTaskRequest,
    current_user: AuthenticatedUser,
    task_service: TaskServiceDep,
) -> TaskResponse:
    """Update one of the caller's tasks."""
    task = await task_service.update_task(
        current_user.id,
        task_id,
        title=request.title,
        description=request.description,
        update_description="description" in request.model_fields_set,
    )
    return TaskResponse.model_validate(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse, "description": "Task not found"}},
)
async def delete_task_by_id(
    task_id: int,
    current_user: AuthenticatedUser,
    task_service: TaskServiceDep,
) -> None:
    """Delete one of the caller's tasks."""
    await task_service.delete_task(current_user.id, task_id)
