"""
Authentication service for login.
"""
import logging
from typing import Optional

from socialnet.core.security import PasswordEncryptor
from socialnet.database.user_repository import UserRepository
from socialnet.models.user import User

INVALID_CREDENTIALS = "Incorrect email or password"


class AuthFailure(ValueError):
    """Credentials did not identify exactly one user."""

    def __init__(self, message: str = INVALID_CREDENTIALS):
        super().__init__(message)


class AuthService:
    """Service for authentication operations."""

    def __init__(
        self,
        users: UserRepository,
        encrypt: PasswordEncryptor,
        logger: Optional[logging.Logger] = None,
    ):
        self.users = users
        self.encrypt = encrypt
        self.logger = logger or logging.getLogger(__name__)

    async def login(self, email: str, password: str) -> User:
        """
        Authenticate a user by email and password.

        Args:
            email: Login email
            password: Plaintext password

        Returns:
            The matching User

        Raises:
            AuthFailure: If no single user matches. Unknown email, wrong
                password and a failed lookup all raise the same message.
        """
        result = await self.users.get_users({
            "email": email,
            "password_hash": self.encrypt(password),
        })

        if result.failed or result.is_empty:
            raise AuthFailure()

        if len(result.value) > 1:
            self.logger.error(
                f"Invariant violation: {len(result.value)} users share the email {email}"
            )
            raise AuthFailure()

        user = result.value[0]
        self.logger.info(f"The user {user.email} has logged in")
        return user

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Returns:
            User model or None if not found or the lookup failed
        """
        result = await self.users.get_users({"email": email})
        if result.failed or result.is_empty:
            return None
        return result.value[0]
