"""Current user use cases."""

from pydantic import BaseModel, Field

from agora.domain.service import UserService
from agora.domain.value import UserId

from .common import UserItem


class GetCurrentUserUseCase:
    """Use case for getting the authenticated user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, user_id: int) -> UserItem:
        """Execute get current user flow.

        Raises:
            NotFoundError: If the account no longer exists
        """
        user = await self.user_service.get_user_by_id(UserId(user_id))
        return UserItem.from_domain(user)


class UpdateCurrentUserRequest(BaseModel):
    """Update current user request."""

    user_id: int
    username: str = Field(min_length=3, max_length=50)


class UpdateCurrentUserUseCase:
    """Use case for changing the authenticated user's username."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateCurrentUserRequest) -> UserItem:
        """Execute update current user flow.

        Raises:
            ValidationError: If the username is malformed
            ConflictError: If another user has the username
        """
        user = await self.user_service.update_username(
            UserId(request.user_id), request.username
        )
        return UserItem.from_domain(user)
