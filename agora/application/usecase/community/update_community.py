"""Update community use case."""

from pydantic import BaseModel, Field

from agora.domain.service import CommunityService
from agora.domain.value import CommunityId, UserId

from .common import CommunityItem


class UpdateCommunityRequest(BaseModel):
    """Update community request."""

    community_id: int
    user_id: int  # User ID from authenticated user
    name: str = Field(min_length=3, max_length=100)


class UpdateCommunityUseCase:
    """Use case for renaming a community."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize update community use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: UpdateCommunityRequest) -> CommunityItem:
        """Execute update community flow.

        Raises:
            NotFoundError: If the community doesn't exist
            NotAuthorizedError: If the user is not the creator
            ConflictError: If the new name is taken
        """
        community_id = CommunityId(request.community_id)
        user_id = UserId(request.user_id)

        await self.community_service.update_community(
            community_id, user_id, request.name
        )

        view = await self.community_service.get_community_view(community_id, user_id)
        return CommunityItem.from_view(view)
