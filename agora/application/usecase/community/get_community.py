"""Get community use case."""

from pydantic import BaseModel

from agora.domain.service import CommunityService
from agora.domain.value import CommunityId, UserId

from .common import CommunityItem


class GetCommunityRequest(BaseModel):
    """Get community request."""

    community_id: int
    viewer_id: int | None = None  # Authenticated viewer (optional)


class GetCommunityUseCase:
    """Use case for getting a single community."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize get community use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: GetCommunityRequest) -> CommunityItem:
        """Execute get community flow.

        Raises:
            NotFoundError: If the community doesn't exist
        """
        view = await self.community_service.get_community_view(
            CommunityId(request.community_id),
            UserId(request.viewer_id) if request.viewer_id else None,
        )
        return CommunityItem.from_view(view)
