"""Task repository for database operations.

Every query takes the owning user ID and filters on it, so a task that
belongs to someone else is indistinguishable from a missing one.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.infrastructure.persistence.models import TaskModel


class TaskRepository:
    """Repository for user-scoped task database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, task: TaskModel) -> TaskModel:
        """Create a new task.

        Args:
            task: Task model to create. ``user_id`` must already be set.

        Returns:
            Created task model with its generated ID.
        """
        self.session.add(task)
        await self.session.flush()
        return task

    async def list_for_user(self, user_id: int) -> list[TaskModel]:
        """List a user's tasks in insertion order.

        Args:
            user_id: Owning user ID.

        Returns:
            List of task models.
        """
        result = await self.session.execute(
            select(TaskModel)
            .where(TaskModel.user_id == user_id)
            .order_by(TaskModel.id)
        )
        return list(result.scalars().all())

    async def get_for_user(self, user_id: int, task_id: int) -> TaskModel | None:
        """Get a task by ID if it belongs to the user.

        Args:
            user_id: Owning user ID.
            task_id: Task ID.

        Returns:
            Task model if it exists and is owned by the user, None otherwise.
        """
        result = await self.session.execute(
            select(TaskModel).where(
                TaskModel.id == task_id,
                TaskModel.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def update(self, task: TaskModel) -> TaskModel:
        """Flush pending changes on a task.

        Args:
            task: Task model with modified attributes.

        Returns:
            Updated task model.
        """
        await self.session.flush()
        return task

    async def delete_for_user(self, user_id: int, task_id: int) -> bool:
        """Delete a task if it belongs to the user.

        Args:
            user_id: Owning user ID.
            task_id: Task ID.

        Returns:
            True if a row was deleted, False otherwise.
        """
        result = await self.session.execute(
            delete(TaskModel).where(
                TaskModel.id == task_id,
                TaskModel.user_id == user_id,
            )
        )
        await self.session.flush()
        return result.rowcount > 0
