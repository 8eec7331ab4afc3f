"""Unit tests for LikeService."""

import pytest

from agora.domain.error import NotFoundError
from agora.domain.repository import LikeRepository
from agora.domain.service import LikeService
from agora.domain.value import LikeTarget, UserId
from tests.conftest import seed_comment, seed_community, seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestTogglePostLike:
    """Tests for toggle_like on posts."""

    @pytest.mark.asyncio
    async def test_first_toggle_likes_second_unlikes(self, unit_env):
        """Toggling twice returns to the original state."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        author = await seed_user(unit_env, "author")
        liker = await seed_user(unit_env, "liker")
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)

        # Act
        first = await like_service.toggle_like(LikeTarget.POST, post.id, liker.id)
        second = await like_service.toggle_like(LikeTarget.POST, post.id, liker.id)

        # Assert
        assert first.liked is True
        assert first.count == 1
        assert second.liked is False
        assert second.count == 0

    @pytest.mark.asyncio
    async def test_count_reflects_other_users(self, unit_env):
        """Like count covers every user's like, not just the caller's."""
        like_service = await unit_env.get(LikeService)
        author = await seed_user(unit_env, "author")
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        others = [await seed_user(unit_env, f"user_{i}") for i in range(3)]
        for other in others:
            await like_service.toggle_like(LikeTarget.POST, post.id, other.id)

        state = await like_service.toggle_like(LikeTarget.POST, post.id, author.id)

        assert state.liked is True
        assert state.count == 4

    @pytest.mark.asyncio
    async def test_unknown_post_raises_not_found(self, unit_env):
        """Liking a post that doesn't exist is a 404, and nothing is stored."""
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)

        with pytest.raises(NotFoundError, match="Post not found"):
            await like_service.toggle_like(LikeTarget.POST, 5, UserId(1))

        assert await like_repo.count(LikeTarget.POST, 5) == 0


class TestToggleCommentLike:
    """Tests for toggle_like on comments."""

    @pytest.mark.asyncio
    async def test_comment_and_post_likes_are_independent(self, unit_env):
        """Liking a comment leaves the post's likes alone."""
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        author = await seed_user(unit_env, "author")
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        comment = await seed_comment(unit_env, author, post)

        state = await like_service.toggle_like(
            LikeTarget.COMMENT, comment.id, author.id
        )

        assert state.liked is True
        assert state.count == 1
        assert await like_repo.count(LikeTarget.POST, post.id) == 0

    @pytest.mark.asyncio
    async def test_unknown_comment_raises_not_found(self, unit_env):
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await like_service.toggle_like(LikeTarget.COMMENT, 42, UserId(1))
