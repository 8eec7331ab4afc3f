"""List community members use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from agora.application.usecase.pagination import PageRequest, Pagination
from agora.domain.service import CommunityService
from agora.domain.value import CommunityId


class MemberItem(BaseModel):
    """Community member in response."""

    user_id: int
    username: str
    email: str
    profile_image: str | None
    joined_at: datetime
    is_creator: bool


class ListMembersRequest(PageRequest):
    """List members request."""

    community_id: int
    limit: int = Field(default=20, ge=1, le=100)


class ListMembersResponse(BaseModel):
    """List members response."""

    members: list[MemberItem]
    pagination: Pagination


class ListMembersUseCase:
    """Use case for listing a community's members, oldest first."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize list members use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: ListMembersRequest) -> ListMembersResponse:
        """Execute list members flow.

        Raises:
            NotFoundError: If the community doesn't exist
        """
        members, total = await self.community_service.list_members(
            CommunityId(request.community_id),
            limit=request.limit,
            offset=request.offset,
        )
        return ListMembersResponse(
            members=[
                MemberItem(
                    user_id=member.user_id,
                    username=member.username.root,
                    email=member.email,
                    profile_image=member.profile_image,
                    joined_at=member.joined_at,
                    is_creator=member.is_creator,
                )
                for member in members
            ],
            pagination=Pagination.build(request, total),
        )
