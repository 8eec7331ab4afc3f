"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel

from agora.application.usecase.comment import (
    CommentItem,
    CommentNodeResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    ListUserCommentsRequest,
    ListUserCommentsResponse,
    ListUserCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from agora.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from agora.domain.service import JWTService
from agora.domain.value import LikeTarget
from agora.interface.api.security import optional_user_id, require_user_id

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    body: str
    parent_comment_id: int | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    body: str


@router.get("/post/{post_id}", response_model=GetCommentsResponse)
async def get_comments(
    post_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetCommentsResponse:
    """Get all comments for a post as a nested tree.

    Top-level comments and each reply list are ordered oldest first.

    Args:
        post_id: Post ID
        get_comments_use_case: Get comments use case from DI
        jwt_service: JWT service for the optional viewer
        authorization: Bearer credential (optional)

    Returns:
        Comment forest with like counts and the viewer's like flags
    """
    viewer_id = optional_user_id(jwt_service, authorization)
    return await get_comments_use_case.execute(
        GetCommentsRequest(post_id=post_id, viewer_id=viewer_id)
    )


@router.post(
    "/post/{post_id}",
    response_model=CommentNodeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CommentNodeResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication. The text is scored by the toxicity service
    before anything is stored.

    Args:
        post_id: Post ID
        request: Comment text and optional parent comment
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification
        authorization: Bearer credential

    Returns:
        The created comment with an empty reply list

    Raises:
        ContentRejectedError: If moderation denies the text (400 with scores)
        NotFoundError: If the post or parent comment doesn't exist
    """
    user_id = require_user_id(jwt_service, authorization)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=post_id,
            user_id=user_id,
            body=request.body,
            parent_comment_id=request.parent_comment_id,
        )
    )


@router.get("/user/{user_id}", response_model=ListUserCommentsResponse)
async def list_user_comments(
    user_id: int,
    list_user_comments_use_case: FromDishka[ListUserCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    page: int = Query(default=1),
    limit: int = Query(default=10),
) -> ListUserCommentsResponse:
    """List a user's comments, newest first, with the post each belongs to."""
    viewer_id = optional_user_id(jwt_service, authorization)
    return await list_user_comments_use_case.execute(
        ListUserCommentsRequest(
            user_id=user_id, viewer_id=viewer_id, page=page, limit=limit
        )
    )


@router.put("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Edit a comment. Only the author may; the new text is moderated."""
    user_id = require_user_id(jwt_service, authorization)
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, user_id=user_id, body=request.body
        )
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment together with its replies."""
    user_id = require_user_id(jwt_service, authorization)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
    )


@router.post("/{comment_id}/like", response_model=ToggleLikeResponse)
async def toggle_comment_like(
    comment_id: int,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ToggleLikeResponse:
    """Like the comment, or remove the like if the user already liked it."""
    user_id = require_user_id(jwt_service, authorization)
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(
            target=LikeTarget.COMMENT, target_id=comment_id, user_id=user_id
        )
    )
