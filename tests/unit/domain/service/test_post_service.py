"""Unit tests for PostService."""

import pytest

from agora.domain.error import NotAuthorizedError, NotFoundError
from agora.domain.repository import CommentRepository, PostRepository
from agora.domain.service import LikeService, PostService
from agora.domain.value import CommunityId, LikeTarget
from tests.conftest import seed_comment, seed_community, seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_post_in_community(self, unit_env):
        post_service = await unit_env.get(PostService)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)

        post = await post_service.create_post(
            "Results", "We measured things", None, community.id, author.id
        )

        assert post.title == "Results"
        assert post.community_id == community.id
        assert post.user_id == author.id

    @pytest.mark.asyncio
    async def test_unknown_community_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)
        author = await seed_user(unit_env)

        with pytest.raises(NotFoundError, match="Community not found"):
            await post_service.create_post(
                "Lost", None, None, CommunityId(99), author.id
            )


class TestListPosts:
    """Tests for list_posts."""

    @pytest.mark.asyncio
    async def test_newest_first_with_aggregates(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        like_service = await unit_env.get(LikeService)
        author = await seed_user(unit_env, "author")
        viewer = await seed_user(unit_env, "viewer")
        community = await seed_community(unit_env, author)
        older = await seed_post(unit_env, author, community, title="Older")
        newer = await seed_post(unit_env, author, community, title="Newer")
        await seed_comment(unit_env, author, older)
        await like_service.toggle_like(LikeTarget.POST, older.id, viewer.id)

        # Act
        posts, total = await post_service.list_posts(viewer_id=viewer.id)

        # Assert
        assert total == 2
        assert [p.id for p in posts] == [newer.id, older.id]
        assert posts[1].like_count == 1
        assert posts[1].comment_count == 1
        assert posts[1].liked_by_viewer is True
        assert posts[0].liked_by_viewer is False

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, unit_env):
        post_service = await unit_env.get(PostService)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        await seed_post(unit_env, author, community, title="Protein Folding")
        await seed_post(unit_env, author, community, title="Dark Matter")

        posts, total = await post_service.list_posts(search="protein")

        assert total == 1
        assert posts[0].title == "Protein Folding"

    @pytest.mark.asyncio
    async def test_filters_and_pages(self, unit_env):
        post_service = await unit_env.get(PostService)
        author = await seed_user(unit_env)
        physics = await seed_community(unit_env, author, "Physics")
        biology = await seed_community(unit_env, author, "Biology")
        for i in range(3):
            await seed_post(unit_env, author, physics, title=f"Physics {i}")
        await seed_post(unit_env, author, biology, title="Biology 0")

        posts, total = await post_service.list_posts(
            community_id=physics.id, limit=2, offset=2
        )

        assert total == 3
        assert [p.title for p in posts] == ["Physics 0"]


class TestUpdateAndDeletePost:
    """Tests for update_post and delete_post."""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, unit_env):
        post_service = await unit_env.get(PostService)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)

        updated = await post_service.update_post(post.id, author.id, title="Renamed")

        assert updated.title == "Renamed"
        assert updated.body == post.body

    @pytest.mark.asyncio
    async def test_non_author_cannot_update(self, unit_env):
        post_service = await unit_env.get(PostService)
        author = await seed_user(unit_env, "author")
        intruder = await seed_user(unit_env, "intruder")
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)

        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(post.id, intruder.id, title="Hijacked")

    @pytest.mark.asyncio
    async def test_delete_cascades_to_comments(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        comment = await seed_comment(unit_env, author, post)

        await post_service.delete_post(post.id, author.id)

        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.find_by_id(comment.id) is None
