"""JWT token domain service."""

import logfire

from agora.config import AuthSettings
from agora.domain.error import AuthenticationError
from agora.domain.model.user import User
from agora.domain.value import UserId
from agora.util.error import JWTError
from agora.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create a bearer token carrying the user's ID and role.

        Args:
            user: Authenticated user

        Returns:
            JWT token string
        """
        token = create_token(user.id, user.role.value, self.auth_settings)
        logfire.info("JWT token created", user_id=user.id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.info("JWT token verification failed", error=str(e))
            raise AuthenticationError(str(e)) from e

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract user ID from JWT token without raising exceptions.

        For routes where authentication is optional: a missing or invalid
        token means an anonymous viewer.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None otherwise
        """
        if not token:
            return None

        try:
            return UserId(self.verify_token(token).user_id)
        except AuthenticationError:
            return None
