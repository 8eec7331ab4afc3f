"""List posts use case."""

from pydantic import BaseModel, Field

from agora.application.usecase.pagination import PageRequest, Pagination
from agora.domain.service import PostService
from agora.domain.value import CommunityId, UserId

from .common import PostItem


class ListPostsRequest(PageRequest):
    """List posts request."""

    viewer_id: int | None = None  # Authenticated viewer (optional)
    community_id: int | None = None
    author_id: int | None = None
    search: str | None = Field(default=None, max_length=255)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    pagination: Pagination


class ListPostsUseCase:
    """Use case for listing posts, newest first.

    Serves the main feed, community pages and a user's post history.
    """

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Filters and page selection

        Returns:
            Page of posts with pagination metadata
        """
        views, total = await self.post_service.list_posts(
            viewer_id=UserId(request.viewer_id) if request.viewer_id else None,
            community_id=(
                CommunityId(request.community_id)
                if request.community_id is not None
                else None
            ),
            author_id=(
                UserId(request.author_id) if request.author_id is not None else None
            ),
            search=request.search.strip() if request.search else None,
            limit=request.limit,
            offset=request.offset,
        )

        return ListPostsResponse(
            posts=[PostItem.from_view(view) for view in views],
            pagination=Pagination.build(request, total),
        )
