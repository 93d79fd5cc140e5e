"""Authentication service for sign-up and login.

Sign-up checks email uniqueness, hashes the password and stores the user.
Login looks the user up, verifies the password and issues an access token.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.core.logging import get_logger, mask_email
from tasklist.domain.exceptions import EmailAlreadyExistsError, InvalidCredentialsError
from tasklist.infrastructure.auth import JWTService, PasswordHasher
from tasklist.infrastructure.persistence.models import UserModel
from tasklist.infrastructure.persistence.repositories import UserRepository

logger = get_logger(__name__)

SIGNUP_SUCCESS_MESSAGE = "ok"


class AuthService:
    """Service for sign-up and login business logic."""

    def __init__(
        self,
        session: AsyncSession,
        password_hasher: PasswordHasher,
        jwt_service: JWTService,
    ) -> None:
        """Initialize the auth service.

        Args:
            session: SQLAlchemy async session.
            password_hasher: Hasher used for storing and checking passwords.
            jwt_service: Service used to issue access tokens.
        """
        self.session = session
        self.password_hasher = password_hasher
        self.jwt_service = jwt_service
        self.user_repo = UserRepository(session)

    async def sign_up(
        self, email: str, password: str, nick_name: str | None = None
    ) -> str:
        """Register a new user.

        Args:
            email: Email address, stored as given.
            password: Plaintext password.
            nick_name: Optional display name.

        Returns:
            Success acknowledgement message.

        Raises:
            EmailAlreadyExistsError: If the email is already registered.
        """
        if await self.user_repo.email_exists(email):
            logger.info("Sign-up rejected: email exists", email=mask_email(email))
            raise EmailAlreadyExistsError(email)

        user = UserModel(
            email=email,
            password_hash=self.password_hasher.hash(password),
            nick_name=nick_name,
        )
        try:
            await self.user_repo.create(user)
            await self.session.commit()
        except IntegrityError as e:
            # Lost a race against a concurrent sign-up for the same email
            await self.session.rollback()
            logger.info("Sign-up rejected: email exists", email=mask_email(email))
            raise EmailAlreadyExistsError(email) from e

        logger.info("User signed up", user_id=user.id, email=mask_email(email))
        return SIGNUP_SUCCESS_MESSAGE

    async def login(self, email: str, password: str) -> str:
        """Authenticate a user and issue an access token.

        Args:
            email: Email address.
            password: Plaintext password.

        Returns:
            Encoded access token.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong.
        """
        user = await self.user_repo.get_by_email(email)

        if user is None:
            # Spend the same hashing time as a real check
            self.password_hasher.verify(password, self.password_hasher.dummy_hash)
            logger.info("Login failed", reason="unknown_email")
            raise InvalidCredentialsError()

        if not self.password_hasher.verify(password, user.password_hash):
            logger.info("Login failed", reason="wrong_password", user_id=user.id)
            raise InvalidCredentialsError()

        logger.info("Login succeeded", user_id=user.id)
        return self.jwt_service.create_access_token(user.id)
