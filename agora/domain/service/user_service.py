"""User domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from agora.config import AuthSettings
from agora.domain.error import ConflictError, NotFoundError, ValidationError
from agora.domain.model.user import User
from agora.domain.repository import UserRepository
from agora.domain.value import Role, UserId, Username
from agora.util.password import hash_password, verify_password

from .base import Service


def _parse_username(username: str) -> Username:
    try:
        return Username(username)
    except ValueError as e:
        raise ValidationError(
            "Username must be 3-50 characters: letters, numbers and underscores"
        ) from e


class UserService(Service):
    """Domain service for user accounts."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(
        self, username: str, email: str, password: str, role: str | None = None
    ) -> User:
        """Register a new user account.

        Args:
            username: Desired username
            email: Email address (compared case-insensitively)
            password: Plain password, hashed before storage
            role: Requested role; unknown values fall back to "user"

        Returns:
            Created user

        Raises:
            ValidationError: If username or password is malformed
            ConflictError: If the email or username is already taken
        """
        parsed = _parse_username(username)
        email = email.strip().lower()
        if len(password) < self.auth_settings.min_password_length:
            raise ValidationError(
                "Password must be at least "
                f"{self.auth_settings.min_password_length} characters"
            )

        with logfire.span("user_service.register", username=parsed.root):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration with existing email")
                raise ConflictError("User with this email already exists")
            if await self.user_repository.find_by_username(parsed.root):
                logfire.warn("Registration with taken username", username=parsed.root)
                raise ConflictError("Username already taken")

            try:
                user = await self.user_repository.create(
                    username=parsed.root,
                    email=email,
                    password_hash=hash_password(password),
                    role=Role.parse(role),
                )
            except IntegrityError:
                raise ConflictError("User with this email or username already exists")

            logfire.info("User registered", user_id=user.id, role=user.role.value)
            return user

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Raises:
            ValidationError: If the email is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            user = await self.user_repository.find_by_email(email.strip().lower())
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Failed login attempt")
                raise ValidationError("Invalid email or password")

            logfire.info("User logged in", user_id=user.id)
            return user

    async def get_user_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user

    async def update_username(self, user_id: UserId, username: str) -> User:
        """Change a user's username.

        Raises:
            ValidationError: If the username is malformed
            ConflictError: If another user has the username
            NotFoundError: If the user doesn't exist
        """
        parsed = _parse_username(username)
        with logfire.span("user_service.update_username", user_id=user_id):
            existing = await self.user_repository.find_by_username(parsed.root)
            if existing and existing.id != user_id:
                raise ConflictError("Username already taken")

            try:
                updated = await self.user_repository.update_username(
                    user_id, parsed.root
                )
            except IntegrityError:
                logfire.warn("Duplicate username on rename", user_id=user_id)
                raise ConflictError("Username already taken")
            if not updated:
                raise NotFoundError("User", user_id)
            logfire.info("Username updated", user_id=user_id)
            return updated

    async def email_exists(self, email: str) -> bool:
        """Check whether an account uses the given email."""
        user = await self.user_repository.find_by_email(email.strip().lower())
        return user is not None
