"""Community use cases."""

from .common import CommunityItem, MessageResponse
from .create_community import CreateCommunityRequest, CreateCommunityUseCase
from .delete_community import DeleteCommunityRequest, DeleteCommunityUseCase
from .get_community import GetCommunityRequest, GetCommunityUseCase
from .list_communities import (
    ListCommunitiesRequest,
    ListCommunitiesResponse,
    ListCommunitiesUseCase,
    ListUserCommunitiesRequest,
    ListUserCommunitiesResponse,
    ListUserCommunitiesUseCase,
)
from .list_members import ListMembersRequest, ListMembersResponse, ListMembersUseCase
from .membership import JoinCommunityUseCase, LeaveCommunityUseCase, MembershipRequest
from .update_community import UpdateCommunityRequest, UpdateCommunityUseCase

__all__ = [
    "CommunityItem",
    "CreateCommunityRequest",
    "CreateCommunityUseCase",
    "DeleteCommunityRequest",
    "DeleteCommunityUseCase",
    "GetCommunityRequest",
    "GetCommunityUseCase",
    "JoinCommunityUseCase",
    "LeaveCommunityUseCase",
    "ListCommunitiesRequest",
    "ListCommunitiesResponse",
    "ListCommunitiesUseCase",
    "ListMembersRequest",
    "ListMembersResponse",
    "ListMembersUseCase",
    "ListUserCommunitiesRequest",
    "ListUserCommunitiesResponse",
    "ListUserCommunitiesUseCase",
    "MembershipRequest",
    "MessageResponse",
    "UpdateCommunityRequest",
    "UpdateCommunityUseCase",
]
