"""List communities use cases."""

from pydantic import BaseModel, Field

from agora.application.usecase.pagination import PageRequest, Pagination
from agora.domain.service import CommunityService
from agora.domain.value import UserId

from .common import CommunityItem


class ListCommunitiesRequest(PageRequest):
    """List communities request."""

    limit: int = Field(default=20, ge=1, le=100)
    search: str | None = Field(default=None, max_length=100)


class ListCommunitiesResponse(BaseModel):
    """List communities response."""

    communities: list[CommunityItem]
    pagination: Pagination


class ListCommunitiesUseCase:
    """Use case for browsing communities by name."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize list communities use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: ListCommunitiesRequest) -> ListCommunitiesResponse:
        """Execute list communities flow."""
        views, total = await self.community_service.list_communities(
            search=request.search.strip() if request.search else None,
            limit=request.limit,
            offset=request.offset,
        )
        return ListCommunitiesResponse(
            communities=[CommunityItem.from_view(view) for view in views],
            pagination=Pagination.build(request, total),
        )


class ListUserCommunitiesRequest(PageRequest):
    """List the current user's communities."""

    limit: int = Field(default=20, ge=1, le=100)
    user_id: int


class ListUserCommunitiesResponse(BaseModel):
    """List user communities response."""

    communities: list[CommunityItem]


class ListUserCommunitiesUseCase:
    """Use case for listing the communities a user has joined."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize list user communities use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(
        self, request: ListUserCommunitiesRequest
    ) -> ListUserCommunitiesResponse:
        """Execute list user communities flow (most recently joined first)."""
        views = await self.community_service.list_user_communities(
            UserId(request.user_id), limit=request.limit, offset=request.offset
        )
        return ListUserCommunitiesResponse(
            communities=[CommunityItem.from_view(view) for view in views]
        )
