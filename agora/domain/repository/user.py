"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.user import User
from agora.domain.value import Role, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (expects a lower-cased address).

        Args:
            email: Email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username (exact match).

        Args:
            username: Username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(
        self, username: str, email: str, password_hash: str, role: Role
    ) -> User:
        """Insert a new user.

        Args:
            username: Unique username
            email: Unique, lower-cased email
            password_hash: Argon2 hash of the password
            role: Role claim

        Returns:
            The created user with its database ID

        Raises:
            IntegrityError: If username or email is already taken
        """
        pass

    @abstractmethod
    async def update_username(self, user_id: UserId, username: str) -> Optional[User]:
        """Change a user's username.

        Args:
            user_id: User ID
            username: New username

        Returns:
            Updated user, or None if the user doesn't exist
        """
        pass
