"""Create post use case."""

from pydantic import BaseModel, Field

from agora.domain.service import PostService
from agora.domain.value import CommunityId, UserId

from .common import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str = Field(min_length=1, max_length=255)
    body: str | None = Field(default=None, max_length=5000)
    image: str | None = None
    community_id: int
    user_id: int  # User ID from authenticated user


class CreatePostUseCase:
    """Use case for creating a post in a community."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            Created post with aggregates

        Raises:
            NotFoundError: If the community doesn't exist
        """
        user_id = UserId(request.user_id)
        post = await self.post_service.create_post(
            title=request.title,
            body=request.body,
            image=request.image,
            community_id=CommunityId(request.community_id),
            user_id=user_id,
        )

        view = await self.post_service.get_post_view(post.id, user_id)
        return PostItem.from_view(view)
