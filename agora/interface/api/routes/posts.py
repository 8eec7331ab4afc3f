"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel

from agora.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from agora.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostItem,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from agora.domain.service import JWTService
from agora.domain.value import LikeTarget
from agora.interface.api.security import optional_user_id, require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str
    body: str | None = None
    image: str | None = None
    community_id: int


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post. Omitted fields are left unchanged."""

    title: str | None = None
    body: str | None = None
    image: str | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    page: int = Query(default=1),
    limit: int = Query(default=10),
    community_id: int | None = Query(default=None),
    search: str | None = Query(default=None),
) -> ListPostsResponse:
    """List posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        jwt_service: JWT service for the optional viewer
        authorization: Bearer credential (optional)
        page: Page number (1-indexed)
        limit: Page size (max 100)
        community_id: Only posts in this community
        search: Case-insensitive filter over title and body

    Returns:
        Posts with like and comment counts, plus pagination
    """
    viewer_id = optional_user_id(jwt_service, authorization)
    return await list_posts_use_case.execute(
        ListPostsRequest(
            page=page,
            limit=limit,
            viewer_id=viewer_id,
            community_id=community_id,
            search=search,
        )
    )


@router.get("/user/{user_id}", response_model=ListPostsResponse)
async def list_user_posts(
    user_id: int,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    page: int = Query(default=1),
    limit: int = Query(default=10),
) -> ListPostsResponse:
    """List posts written by a user, newest first."""
    viewer_id = optional_user_id(jwt_service, authorization)
    return await list_posts_use_case.execute(
        ListPostsRequest(
            page=page, limit=limit, viewer_id=viewer_id, author_id=user_id
        )
    )


@router.get("/{post_id}", response_model=PostItem)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostItem:
    """Get a single post."""
    viewer_id = optional_user_id(jwt_service, authorization)
    return await get_post_use_case.execute(
        GetPostRequest(post_id=post_id, viewer_id=viewer_id)
    )


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostItem:
    """Create a post in a community.

    Requires authentication.

    Raises:
        NotFoundError: If the community doesn't exist
    """
    user_id = require_user_id(jwt_service, authorization)
    return await create_post_use_case.execute(
        CreatePostRequest(
            title=request.title,
            body=request.body,
            image=request.image,
            community_id=request.community_id,
            user_id=user_id,
        )
    )


@router.put("/{post_id}", response_model=PostItem)
async def update_post(
    post_id: int,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostItem:
    """Edit a post. Only the author may edit it."""
    user_id = require_user_id(jwt_service, authorization)
    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            user_id=user_id,
            title=request.title,
            body=request.body,
            image=request.image,
        )
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: int,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeletePostResponse:
    """Delete a post with its comments and likes. Only the author may."""
    user_id = require_user_id(jwt_service, authorization)
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=user_id)
    )


@router.post("/{post_id}/like", response_model=ToggleLikeResponse)
async def toggle_post_like(
    post_id: int,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ToggleLikeResponse:
    """Like the post, or remove the like if the user already liked it.

    Requires authentication.

    Returns:
        Whether the user now likes the post, and the post's like count
    """
    user_id = require_user_id(jwt_service, authorization)
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(target=LikeTarget.POST, target_id=post_id, user_id=user_id)
    )
