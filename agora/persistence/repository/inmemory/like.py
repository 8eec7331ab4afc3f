"""In-memory like repository for testing."""

from agora.domain.repository.like import LikeRepository
from agora.domain.value import LikeTarget, UserId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def lock_target(self, target: LikeTarget, target_id: int) -> bool:
        """Report whether the target exists (nothing to lock in memory)."""
        if target == LikeTarget.POST:
            return target_id in self._store.posts
        return target_id in self._store.comments

    async def add(self, target: LikeTarget, target_id: int, user_id: UserId) -> bool:
        """Insert a like, ignoring an existing one."""
        pair = (target_id, user_id)
        if pair in self._store.likes[target]:
            return False
        self._store.likes[target].add(pair)
        return True

    async def remove(
        self, target: LikeTarget, target_id: int, user_id: UserId
    ) -> bool:
        """Delete a like if present."""
        pair = (target_id, user_id)
        if pair not in self._store.likes[target]:
            return False
        self._store.likes[target].discard(pair)
        return True

    async def count(self, target: LikeTarget, target_id: int) -> int:
        """Count likes on a target."""
        return self._store.like_count(target, target_id)
