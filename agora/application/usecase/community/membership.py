"""Join and leave community use cases."""

from pydantic import BaseModel

from agora.domain.service import CommunityService
from agora.domain.value import CommunityId, UserId

from .common import MessageResponse


class MembershipRequest(BaseModel):
    """Join/leave request."""

    community_id: int
    user_id: int  # User ID from authenticated user


class JoinCommunityUseCase:
    """Use case for joining a community."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self, request: MembershipRequest) -> MessageResponse:
        """Execute join flow.

        Raises:
            NotFoundError: If the community doesn't exist
            BusinessRuleViolationError: If the user is already a member
        """
        await self.community_service.join_community(
            CommunityId(request.community_id), UserId(request.user_id)
        )
        return MessageResponse(message="Successfully joined community")


class LeaveCommunityUseCase:
    """Use case for leaving a community."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self, request: MembershipRequest) -> MessageResponse:
        """Execute leave flow.

        Raises:
            NotFoundError: If the community doesn't exist
            BusinessRuleViolationError: If the user is the creator or not a member
        """
        await self.community_service.leave_community(
            CommunityId(request.community_id), UserId(request.user_id)
        )
        return MessageResponse(message="Successfully left community")
