"""Delete community use case."""

from pydantic import BaseModel

from agora.domain.service import CommunityService
from agora.domain.value import CommunityId, UserId

from .common import MessageResponse


class DeleteCommunityRequest(BaseModel):
    """Delete community request."""

    community_id: int
    user_id: int


class DeleteCommunityUseCase:
    """Use case for deleting a community and everything in it."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize delete community use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: DeleteCommunityRequest) -> MessageResponse:
        """Execute delete community flow.

        Raises:
            NotFoundError: If the community doesn't exist
            NotAuthorizedError: If the user is not the creator
        """
        await self.community_service.delete_community(
            CommunityId(request.community_id), UserId(request.user_id)
        )
        return MessageResponse(message="Community deleted successfully")
