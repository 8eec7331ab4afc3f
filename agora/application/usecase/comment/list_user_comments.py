"""List user comments use case."""

from pydantic import BaseModel

from agora.application.usecase.pagination import PageRequest
from agora.domain.service import CommentService
from agora.domain.value import UserId

from .common import CommentItem


class UserCommentItem(CommentItem):
    """Comment in a user's history, with the title of its post."""

    post_title: str | None


class ListUserCommentsRequest(PageRequest):
    """List user comments request."""

    user_id: int
    viewer_id: int | None = None


class ListUserCommentsResponse(BaseModel):
    """List user comments response."""

    comments: list[UserCommentItem]
    page: int
    limit: int


class ListUserCommentsUseCase:
    """Use case for listing a user's comments, newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list user comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: ListUserCommentsRequest
    ) -> ListUserCommentsResponse:
        """Execute list user comments flow."""
        views = await self.comment_service.list_comments_by_author(
            UserId(request.user_id),
            UserId(request.viewer_id) if request.viewer_id else None,
            limit=request.limit,
            offset=request.offset,
        )

        return ListUserCommentsResponse(
            comments=[
                UserCommentItem(
                    **CommentItem.from_view(view).model_dump(),
                    post_title=view.post_title,
                )
                for view in views
            ],
            page=request.page,
            limit=request.limit,
        )
