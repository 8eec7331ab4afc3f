"""Update comment use case."""

from pydantic import BaseModel, ConfigDict, Field

from agora.domain.error import ContentRejectedError
from agora.domain.service import CommentService, ModerationService, ensure_owner
from agora.domain.value import CommentId, UserId

from .common import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    comment_id: int
    user_id: int  # User ID from authenticated user
    body: str = Field(min_length=1, max_length=1000)


class UpdateCommentUseCase:
    """Use case for editing a comment's body."""

    def __init__(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            moderation_service: Toxicity moderation gate
        """
        self.comment_service = comment_service
        self.moderation_service = moderation_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Only the author can edit. The new body goes through the same
        moderation gate as a new comment.

        Args:
            request: Update comment request

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
            ContentRejectedError: If moderation denies the new body
        """
        comment_id = CommentId(request.comment_id)
        user_id = UserId(request.user_id)

        comment = await self.comment_service.get_comment_by_id(comment_id)
        ensure_owner("comment", comment_id, comment.user_id, user_id)

        verdict = await self.moderation_service.check_toxicity(request.body)
        if not verdict.allowed:
            raise ContentRejectedError(verdict.scores)

        await self.comment_service.update_comment(comment_id, user_id, request.body)

        view = await self.comment_service.get_comment_view(comment_id, user_id)
        return CommentItem.from_view(view)
