"""Get post use case."""

from pydantic import BaseModel

from agora.domain.service import PostService
from agora.domain.value import PostId, UserId

from .common import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int
    viewer_id: int | None = None  # Authenticated viewer (optional)


class GetPostUseCase:
    """Use case for getting a single post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        view = await self.post_service.get_post_view(
            PostId(request.post_id),
            UserId(request.viewer_id) if request.viewer_id else None,
        )
        return PostItem.from_view(view)
