"""Create comment use case."""

import logfire
from pydantic import BaseModel, ConfigDict, Field

from agora.domain.error import ContentRejectedError
from agora.domain.service import CommentNode, CommentService, ModerationService
from agora.domain.value import CommentId, PostId, UserId

from .common import CommentNodeResponse


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    post_id: int
    user_id: int  # User ID from authenticated user
    body: str = Field(min_length=1, max_length=1000)
    parent_comment_id: int | None = Field(default=None, gt=0)  # None for top-level


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            moderation_service: Toxicity moderation gate
        """
        self.comment_service = comment_service
        self.moderation_service = moderation_service

    async def execute(self, request: CreateCommentRequest) -> CommentNodeResponse:
        """Execute create comment flow.

        Steps:
        1. Run the text through the moderation gate
        2. Create comment via comment service (checks post and parent)
        3. Re-fetch the comment with author info and like aggregate

        Any failing step stops the flow before anything is inserted.

        Args:
            request: Create comment request

        Returns:
            The new comment as a tree node without replies

        Raises:
            ContentRejectedError: If moderation denies the text
            NotFoundError: If the post or parent comment doesn't exist
            ValidationError: If the parent belongs to another post
        """
        user_id = UserId(request.user_id)

        verdict = await self.moderation_service.check_toxicity(request.body)
        if not verdict.allowed:
            logfire.info(
                "Comment rejected",
                post_id=request.post_id,
                user_id=request.user_id,
                scores=verdict.scores,
            )
            raise ContentRejectedError(verdict.scores)

        comment = await self.comment_service.create_comment(
            post_id=PostId(request.post_id),
            user_id=user_id,
            body=request.body,
            parent_comment_id=(
                CommentId(request.parent_comment_id)
                if request.parent_comment_id is not None
                else None
            ),
        )

        view = await self.comment_service.get_comment_view(comment.id, user_id)
        return CommentNodeResponse.from_domain(CommentNode(view=view))
