"""Update post use case."""

from pydantic import BaseModel, Field

from agora.domain.service import PostService
from agora.domain.value import PostId, UserId

from .common import PostItem


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None keep their current value.
    """

    post_id: int
    user_id: int  # User ID from authenticated user
    title: str | None = Field(default=None, min_length=1, max_length=255)
    body: str | None = Field(default=None, max_length=5000)
    image: str | None = None


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        post_id = PostId(request.post_id)
        user_id = UserId(request.user_id)

        await self.post_service.update_post(
            post_id,
            user_id,
            title=request.title,
            body=request.body,
            image=request.image,
        )

        view = await self.post_service.get_post_view(post_id, user_id)
        return PostItem.from_view(view)
