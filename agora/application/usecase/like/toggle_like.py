"""Toggle like use case."""

from pydantic import BaseModel

from agora.domain.service import LikeService
from agora.domain.value import LikeTarget, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    target: LikeTarget
    target_id: int
    user_id: int  # User ID from authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    liked: bool
    like_count: int


class ToggleLikeUseCase:
    """Use case for liking or unliking a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            Whether the user now likes the target, and its like count

        Raises:
            NotFoundError: If the target doesn't exist
        """
        state = await self.like_service.toggle_like(
            request.target, request.target_id, UserId(request.user_id)
        )
        return ToggleLikeResponse(liked=state.liked, like_count=state.count)
