"""Like domain service."""

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model.like import LikeState
from agora.domain.repository import LikeRepository
from agora.domain.value import LikeTarget, UserId

from .base import Service


class LikeService(Service):
    """Domain service for like toggling on posts and comments."""

    def __init__(self, like_repository: LikeRepository) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
        """
        self.like_repository = like_repository

    async def toggle_like(
        self, target: LikeTarget, target_id: int, user_id: UserId
    ) -> LikeState:
        """Flip a user's like on a post or comment.

        The target row is locked first so concurrent toggles on the same
        target run one after another within their transactions.

        Args:
            target: Type of the liked entity
            target_id: ID of the liked entity
            user_id: User toggling the like

        Returns:
            New like state and the target's like count after the change

        Raises:
            NotFoundError: If the target doesn't exist
        """
        with logfire.span(
            "like_service.toggle_like",
            target=target.value,
            target_id=target_id,
            user_id=user_id,
        ):
            if not await self.like_repository.lock_target(target, target_id):
                logfire.warn(
                    "Like on non-existent target",
                    target=target.value,
                    target_id=target_id,
                )
                raise NotFoundError(target.value.capitalize(), target_id)

            if await self.like_repository.remove(target, target_id, user_id):
                liked = False
            else:
                await self.like_repository.add(target, target_id, user_id)
                liked = True

            count = await self.like_repository.count(target, target_id)
            logfire.info(
                "Like toggled",
                target=target.value,
                target_id=target_id,
                user_id=user_id,
                liked=liked,
                count=count,
            )
            return LikeState(liked=liked, count=count)
