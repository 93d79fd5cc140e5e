"""Task service for user-scoped task management.

Every operation takes the authenticated user ID as its first argument.
Tasks owned by other users are reported exactly like missing ones.
"""

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.core.logging import get_logger
from tasklist.domain.exceptions import TaskNotFoundError
from tasklist.infrastructure.persistence.models import TaskModel
from tasklist.infrastructure.persistence.repositories import TaskRepository

logger = get_logger(__name__)


class TaskService:
    """Service for task CRUD scoped to a single owner."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the task service.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session
        self.task_repo = TaskRepository(session)

    async def list_tasks(self, user_id: int) -> list[TaskModel]:
        """List all tasks owned by a user."""
        return await self.task_repo.list_for_user(user_id)

    async def get_task(self, user_id: int, task_id: int) -> TaskModel:
        """Get one of the user's tasks.

        Raises:
            TaskNotFoundError: If the task does not exist or is not owned by the user.
        """
        task = await self.task_repo.get_for_user(user_id, task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def create_task(
        self, user_id: int, title: str, description: str | None = None
    ) -> TaskModel:
        """Create a task owned by the user.

        Args:
            user_id: Authenticated user ID. Always becomes the owner.
            title: Task title.
            description: Optional description.

        Returns:
            Created task model.
        """
        task = TaskModel(title=title, description=description, user_id=user_id)
        await self.task_repo.create(task)
        await self.session.commit()
        logger.info("Task created", task_id=task.id, user_id=user_id)
        return task

    async def update_task(
        self,
        user_id: int,
        task_id: int,
        title: str,
        description: str | None = None,
        update_description: bool = True,
    ) -> TaskModel:
        """Replace a task's title and, optionally, its description.

        Args:
            user_id: Authenticated user ID.
            task_id: Task to update.
            title: New title.
            description: New description.
            update_description: Whether ``description`` was supplied and should be written.

        Returns:
            Updated task model.

        Raises:
            TaskNotFoundError: If the task does not exist or is not owned by the user.
        """
        task = await self.get_task(user_id, task_id)
        task.title = title
        if update_description:
            task.description = description
        task.updated_at = datetime.now(timezone.utc)
        await self.task_repo.update(task)
        await self.session.commit()
        logger.info("Task updated", task_id=task_id, user_id=user_id)
        return task

    async def delete_task(self, user_id: int, task_id: int) -> None:
        """Delete one of the user's tasks.

        Raises:
            TaskNotFoundError: If the task does not exist or is not owned by the user.
        """
        if not await self.task_repo.delete_for_user(user_id, task_id):
            raise TaskNotFoundError(task_id)
        await self.session.commit()
        logger.info("Task deleted", task_id=task_id, user_id=user_id)
