"""Create community use case."""

from pydantic import BaseModel, Field

from agora.domain.service import CommunityService
from agora.domain.value import UserId

from .common import CommunityItem


class CreateCommunityRequest(BaseModel):
    """Create community request."""

    name: str = Field(min_length=3, max_length=100)
    user_id: int  # User ID from authenticated user


class CreateCommunityUseCase:
    """Use case for creating a community.

    The creator becomes the community's first member.
    """

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize create community use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: CreateCommunityRequest) -> CommunityItem:
        """Execute create community flow.

        Raises:
            ValidationError: If the name is malformed
            ConflictError: If the name is already taken
        """
        user_id = UserId(request.user_id)
        community = await self.community_service.create_community(
            request.name, user_id
        )

        view = await self.community_service.get_community_view(community.id, user_id)
        return CommunityItem.from_view(view)
