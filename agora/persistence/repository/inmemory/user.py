"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from agora.domain.model.user import User
from agora.domain.repository.user import UserRepository
from agora.domain.value import Role, UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by their username."""
        for user in self._store.users.values():
            if user.username.root == username:
                return user
        return None

    async def create(
        self, username: str, email: str, password_hash: str, role: Role
    ) -> User:
        """Insert a user.

        Raises:
            IntegrityError: If username or email is already taken
        """
        if await self.find_by_email(email) or await self.find_by_username(username):
            raise IntegrityError("Duplicate user", None, Exception())

        now = datetime.now()
        user = User(
            id=UserId(self._store.next_id("users")),
            username=Username(username),
            email=email,
            password_hash=password_hash,
            role=role,
            created_at=now,
            updated_at=now,
        )
        self._store.users[user.id] = user
        return user

    async def update_username(self, user_id: UserId, username: str) -> Optional[User]:
        """Change a user's username.

        Raises:
            IntegrityError: If another user already has the username
        """
        user = self._store.users.get(user_id)
        if not user:
            return None
        if any(
            u.username.root == username and u.id != user_id
            for u in self._store.users.values()
        ):
            raise IntegrityError("Duplicate username", None, Exception())

        updated = user.model_copy(
            update={"username": Username(username), "updated_at": datetime.now()}
        )
        self._store.users[user_id] = updated
        return updated
