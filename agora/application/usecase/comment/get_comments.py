"""Get comments use case."""

from pydantic import BaseModel

from agora.domain.service import CommentService
from agora.domain.value import PostId, UserId

from .common import CommentNodeResponse


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: int
    viewer_id: int | None = None  # Authenticated viewer (optional)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: int
    comments: list[CommentNodeResponse]
    total: int


class GetCommentsUseCase:
    """Use case for getting all comments for a post as a nested forest."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Top-level comments come first in creation order, each carrying its
        replies to any depth. Like counts and the viewer's like flag are
        attached to every node.

        Args:
            request: Get comments request with post ID and optional viewer

        Returns:
            Root comments with nested replies, and the total comment count

        Raises:
            NotFoundError: If the post doesn't exist
        """
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None
        roots, total = await self.comment_service.get_comment_tree(
            PostId(request.post_id), viewer_id
        )

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=[CommentNodeResponse.from_domain(root) for root in roots],
            total=total,
        )
