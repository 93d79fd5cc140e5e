"""User profile service."""

from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.core.logging import get_logger
from tasklist.domain.exceptions import UserNotFoundError
from tasklist.infrastructure.persistence.models import UserModel
from tasklist.infrastructure.persistence.repositories import UserRepository

logger = get_logger(__name__)


class UserService:
    """Service for reading and updating the caller's own profile.

    Only the display name is mutable here. Email and password are not.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the user service.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session
        self.user_repo = UserRepository(session)

    async def get_user(self, user_id: int) -> UserModel:
        """Get a user by ID.

        Raises:
            UserNotFoundError: If the user does not exist.
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def update_user(
        self, user_id: int, nick_name: str | None, update_nick_name: bool = True
    ) -> UserModel:
        """Update the user's display name.

        Args:
            user_id: Authenticated user ID.
            nick_name: New display name.
            update_nick_name: Whether ``nick_name`` was supplied. When False the
                profile is returned unchanged.

        Returns:
            The user model after the update.

        Raises:
            UserNotFoundError: If the user does not exist.
        """
        user = await self.get_user(user_id)
        if update_nick_name:
            user.nick_name = nick_name
            await self.user_repo.update(user)
            await self.session.commit()
            logger.info("User profile updated", user_id=user_id)
        return user
