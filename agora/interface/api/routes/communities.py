"""Community routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel

from agora.application.usecase.community import (
    CommunityItem,
    CreateCommunityRequest,
    CreateCommunityUseCase,
    DeleteCommunityRequest,
    DeleteCommunityUseCase,
    GetCommunityRequest,
    GetCommunityUseCase,
    JoinCommunityUseCase,
    LeaveCommunityUseCase,
    ListCommunitiesRequest,
    ListCommunitiesResponse,
    ListCommunitiesUseCase,
    ListMembersRequest,
    ListMembersResponse,
    ListMembersUseCase,
    ListUserCommunitiesRequest,
    ListUserCommunitiesResponse,
    ListUserCommunitiesUseCase,
    MembershipRequest,
    MessageResponse,
    UpdateCommunityRequest,
    UpdateCommunityUseCase,
)
from agora.domain.service import JWTService
from agora.interface.api.security import optional_user_id, require_user_id

router = APIRouter(prefix="/communities", tags=["communities"], route_class=DishkaRoute)


class CommunityAPIRequest(BaseModel):
    """API request for creating or renaming a community."""

    name: str


@router.get("", response_model=ListCommunitiesResponse)
async def list_communities(
    list_communities_use_case: FromDishka[ListCommunitiesUseCase],
    page: int = Query(default=1),
    limit: int = Query(default=20),
    search: str | None = Query(default=None),
) -> ListCommunitiesResponse:
    """List communities ordered by name.

    Args:
        list_communities_use_case: List communities use case from DI
        page: Page number (1-indexed)
        limit: Page size (max 100)
        search: Optional case-insensitive name filter

    Returns:
        Communities with post and member counts, plus pagination
    """
    return await list_communities_use_case.execute(
        ListCommunitiesRequest(page=page, limit=limit, search=search)
    )


# Registered before /{community_id} so "mine" is not parsed as an ID
@router.get("/mine", response_model=ListUserCommunitiesResponse)
async def list_my_communities(
    list_user_communities_use_case: FromDishka[ListUserCommunitiesUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    page: int = Query(default=1),
    limit: int = Query(default=20),
) -> ListUserCommunitiesResponse:
    """List the communities the authenticated user belongs to.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await list_user_communities_use_case.execute(
        ListUserCommunitiesRequest(user_id=user_id, page=page, limit=limit)
    )


@router.get("/{community_id}", response_model=CommunityItem)
async def get_community(
    community_id: int,
    get_community_use_case: FromDishka[GetCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CommunityItem:
    """Get a community; ``is_member`` reflects the viewer when signed in."""
    viewer_id = optional_user_id(jwt_service, authorization)
    return await get_community_use_case.execute(
        GetCommunityRequest(community_id=community_id, viewer_id=viewer_id)
    )


@router.post("", response_model=CommunityItem, status_code=status.HTTP_201_CREATED)
async def create_community(
    request: CommunityAPIRequest,
    create_community_use_case: FromDishka[CreateCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CommunityItem:
    """Create a community; the creator joins it automatically.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await create_community_use_case.execute(
        CreateCommunityRequest(name=request.name, user_id=user_id)
    )


@router.put("/{community_id}", response_model=CommunityItem)
async def update_community(
    community_id: int,
    request: CommunityAPIRequest,
    update_community_use_case: FromDishka[UpdateCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CommunityItem:
    """Rename a community.

    Only the creator may rename it.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await update_community_use_case.execute(
        UpdateCommunityRequest(
            community_id=community_id, user_id=user_id, name=request.name
        )
    )


@router.delete("/{community_id}", response_model=MessageResponse)
async def delete_community(
    community_id: int,
    delete_community_use_case: FromDishka[DeleteCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Delete a community with its posts, comments and memberships.

    Only the creator may delete it.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await delete_community_use_case.execute(
        DeleteCommunityRequest(community_id=community_id, user_id=user_id)
    )


@router.post("/{community_id}/join", response_model=MessageResponse)
async def join_community(
    community_id: int,
    join_community_use_case: FromDishka[JoinCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Join a community."""
    user_id = require_user_id(jwt_service, authorization)
    return await join_community_use_case.execute(
        MembershipRequest(community_id=community_id, user_id=user_id)
    )


@router.post("/{community_id}/leave", response_model=MessageResponse)
async def leave_community(
    community_id: int,
    leave_community_use_case: FromDishka[LeaveCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Leave a community. Creators cannot leave their own community."""
    user_id = require_user_id(jwt_service, authorization)
    return await leave_community_use_case.execute(
        MembershipRequest(community_id=community_id, user_id=user_id)
    )


@router.get("/{community_id}/members", response_model=ListMembersResponse)
async def list_members(
    community_id: int,
    list_members_use_case: FromDishka[ListMembersUseCase],
    page: int = Query(default=1),
    limit: int = Query(default=20),
) -> ListMembersResponse:
    """List community members, oldest membership first."""
    return await list_members_use_case.execute(
        ListMembersRequest(community_id=community_id, page=page, limit=limit)
    )
