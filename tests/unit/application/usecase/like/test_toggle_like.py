"""Unit tests for ToggleLikeUseCase."""

import pytest

from agora.application.usecase.like import ToggleLikeRequest, ToggleLikeUseCase
from agora.domain.error import NotFoundError
from agora.domain.value import LikeTarget
from tests.conftest import seed_community, seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestToggleLikeUseCase:
    """Tests for ToggleLikeUseCase."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        use_case = await unit_env.get(ToggleLikeUseCase)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        request = ToggleLikeRequest(
            target=LikeTarget.POST, target_id=post.id, user_id=author.id
        )

        liked = await use_case.execute(request)
        unliked = await use_case.execute(request)

        assert (liked.liked, liked.like_count) == (True, 1)
        assert (unliked.liked, unliked.like_count) == (False, 0)

    @pytest.mark.asyncio
    async def test_missing_target(self, unit_env):
        use_case = await unit_env.get(ToggleLikeUseCase)
        user = await seed_user(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ToggleLikeRequest(target=LikeTarget.POST, target_id=5, user_id=user.id)
            )
