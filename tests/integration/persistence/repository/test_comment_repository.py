"""Integration tests for the PostgreSQL comment and like repositories.

Requires a migrated PostgreSQL database reachable through DATABASE__URL:

    alembic upgrade head
    pytest -m integration
"""

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.repository import (
    CommentRepository,
    CommunityRepository,
    LikeRepository,
    PostRepository,
)
from agora.domain.value import LikeTarget
from tests.conftest import seed_comment, seed_community, seed_post, seed_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real PostgreSQL, mocked toxicity scorer
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)
    await session.execute(
        text(
            "TRUNCATE TABLE comments_likes, post_likes, comments, posts, "
            "user_communities, communities, users RESTART IDENTITY CASCADE"
        )
    )
    await session.commit()

    yield


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_views_are_flat_and_oldest_first(self, integration_env):
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        like_repo = await integration_env.get(LikeRepository)
        alice = await seed_user(integration_env, "alice")
        bob = await seed_user(integration_env, "bob")
        community = await seed_community(integration_env, alice)
        post = await seed_post(integration_env, alice, community)
        root = await seed_comment(integration_env, alice, post, "root")
        reply = await seed_comment(integration_env, bob, post, "reply", root.id)
        await like_repo.add(LikeTarget.COMMENT, reply.id, alice.id)

        # Act
        views = await comment_repo.find_views_by_post(post.id, viewer_id=alice.id)

        # Assert
        assert [v.id for v in views] == [root.id, reply.id]
        assert views[1].parent_comment_id == root.id
        assert views[1].username.root == "bob"
        assert views[1].like_count == 1
        assert views[1].liked_by_viewer is True
        assert views[0].liked_by_viewer is False

    @pytest.mark.asyncio
    async def test_delete_cascades_to_replies(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        alice = await seed_user(integration_env, "alice")
        community = await seed_community(integration_env, alice)
        post = await seed_post(integration_env, alice, community)
        root = await seed_comment(integration_env, alice, post, "root")
        await seed_comment(integration_env, alice, post, "reply", root.id)

        assert await comment_repo.delete(root.id) is True

        assert await comment_repo.find_views_by_post(post.id) == []


class TestLikeRepositoryIntegration:
    """Integration tests for PostgresLikeRepository."""

    @pytest.mark.asyncio
    async def test_add_is_idempotent(self, integration_env):
        like_repo = await integration_env.get(LikeRepository)
        alice = await seed_user(integration_env, "alice")
        community = await seed_community(integration_env, alice)
        post = await seed_post(integration_env, alice, community)

        first = await like_repo.add(LikeTarget.POST, post.id, alice.id)
        second = await like_repo.add(LikeTarget.POST, post.id, alice.id)

        assert (first, second) == (True, False)
        assert await like_repo.count(LikeTarget.POST, post.id) == 1


class TestSearchIntegration:
    """Integration tests for literal search on posts and communities."""

    @pytest.mark.asyncio
    async def test_wildcard_characters_match_literally(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        community_repo = await integration_env.get(CommunityRepository)
        alice = await seed_user(integration_env, "alice")
        lab_notes = await seed_community(integration_env, alice, "lab_notes")
        await seed_community(integration_env, alice, "labXnotes")
        await seed_post(integration_env, alice, lab_notes, "snake_case tips")
        await seed_post(integration_env, alice, lab_notes, "snakeXcase tips")

        communities, community_total = await community_repo.list_views(search="b_n")
        posts, post_total = await post_repo.list_views(search="snake_case")

        assert [c.name.root for c in communities] == ["lab_notes"]
        assert community_total == 1
        assert [p.title for p in posts] == ["snake_case tips"]
        assert post_total == 1
