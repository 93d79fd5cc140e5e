"""Password hashing utility using Argon2.

Provides salted, cost-factored password hashing and verification using
the Argon2id algorithm. Cost parameters come from AuthConfig.
"""

from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError

from tasklist.core.config import AuthConfig


class PasswordHasher:
    """Hash and verify passwords with Argon2id."""

    def __init__(self, config: AuthConfig) -> None:
        """Initialize the hasher.

        Args:
            config: Authentication configuration holding the Argon2 cost parameters.
        """
        self._hasher = Argon2Hasher(
            time_cost=config.hash_time_cost,
            memory_cost=config.hash_memory_cost,
            parallelism=config.hash_parallelism,
        )
        # Verified against when a login names an unknown email
        self.dummy_hash = self._hasher.hash("tasklist-dummy-password")

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt.

        Args:
            password: The plaintext password to hash.

        Returns:
            The encoded Argon2id hash.

        Example:
            >>> hashed = hasher.hash("password1")
            >>> hashed.startswith("$argon2id$")
            True
        """
        return self._hasher.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against a stored hash.

        Uses constant-time comparison. Never raises: a mismatch and a
        malformed stored hash both return False.

        Args:
            password: The plaintext password to verify.
            hashed: The stored hash to verify against.

        Returns:
            True if the password matches, False otherwise.
        """
        try:
            return self._hasher.verify(hashed, password)
        except (VerificationError, InvalidHashError):
            return False
