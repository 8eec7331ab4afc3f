"""Unit tests for CommentService."""

import pytest

from agora.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from agora.domain.repository import CommentRepository, LikeRepository
from agora.domain.service import CommentService, LikeService
from agora.domain.value import CommentId, LikeTarget, PostId
from tests.conftest import seed_comment, seed_community, seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_top_level_comment(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)

        # Act
        comment = await comment_service.create_comment(
            post.id, author.id, "First comment"
        )

        # Assert
        assert comment.post_id == post.id
        assert comment.user_id == author.id
        assert comment.parent_comment_id is None

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_same_post(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        parent = await seed_comment(unit_env, author, post)

        reply = await comment_service.create_comment(
            post.id, author.id, "A reply", parent_comment_id=parent.id
        )

        assert reply.parent_comment_id == parent.id

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await seed_user(unit_env)

        with pytest.raises(NotFoundError, match="Post not found"):
            await comment_service.create_comment(PostId(404), author.id, "Hello")

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)

        with pytest.raises(NotFoundError, match="Parent comment not found"):
            await comment_service.create_comment(
                post.id, author.id, "Hello", parent_comment_id=CommentId(77)
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_post_is_rejected_without_insert(self, unit_env):
        """A reply must live on the same post as its parent."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post_a = await seed_post(unit_env, author, community, title="Post A")
        post_b = await seed_post(unit_env, author, community, title="Post B")
        parent_on_a = await seed_comment(unit_env, author, post_a)

        with pytest.raises(ValidationError, match="does not belong to this post"):
            await comment_service.create_comment(
                post_b.id, author.id, "Wrong thread", parent_comment_id=parent_on_a.id
            )

        assert await comment_repo.find_views_by_post(post_b.id) == []


class TestGetCommentTree:
    """Tests for get_comment_tree."""

    @pytest.mark.asyncio
    async def test_tree_with_like_aggregates(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        author = await seed_user(unit_env, "author")
        viewer = await seed_user(unit_env, "viewer")
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)

        a = await seed_comment(unit_env, author, post, "A")
        b = await seed_comment(unit_env, author, post, "B", parent_comment_id=a.id)
        c = await seed_comment(unit_env, author, post, "C")
        d = await seed_comment(unit_env, author, post, "D", parent_comment_id=b.id)
        await like_service.toggle_like(LikeTarget.COMMENT, d.id, viewer.id)

        # Act
        roots, total = await comment_service.get_comment_tree(post.id, viewer.id)

        # Assert
        assert total == 4
        assert [node.id for node in roots] == [a.id, c.id]
        node_d = roots[0].replies[0].replies[0]
        assert node_d.id == d.id
        assert node_d.view.like_count == 1
        assert node_d.view.liked_by_viewer is True
        assert node_d.view.username.root == "author"
        assert roots[0].view.liked_by_viewer is False

    @pytest.mark.asyncio
    async def test_anonymous_viewer_sees_no_liked_flags(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        comment = await seed_comment(unit_env, author, post)
        await like_service.toggle_like(LikeTarget.COMMENT, comment.id, author.id)

        roots, _ = await comment_service.get_comment_tree(post.id)

        assert roots[0].view.like_count == 1
        assert roots[0].view.liked_by_viewer is False

    @pytest.mark.asyncio
    async def test_post_without_comments(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)

        roots, total = await comment_service.get_comment_tree(post.id)

        assert roots == []
        assert total == 0

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.get_comment_tree(PostId(12))


class TestUpdateAndDeleteComment:
    """Tests for update_comment and delete_comment."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        comment = await seed_comment(unit_env, author, post, "Old text")

        updated = await comment_service.update_comment(
            comment.id, author.id, "New text"
        )

        assert updated.body == "New text"

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await seed_user(unit_env, "author")
        intruder = await seed_user(unit_env, "intruder")
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        comment = await seed_comment(unit_env, author, post)

        with pytest.raises(NotAuthorizedError):
            await comment_service.update_comment(comment.id, intruder.id, "Mine now")

    @pytest.mark.asyncio
    async def test_delete_removes_replies_and_likes(self, unit_env):
        """Deleting a comment cascades to its replies and their likes."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        like_service = await unit_env.get(LikeService)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        parent = await seed_comment(unit_env, author, post, "Parent")
        reply = await seed_comment(
            unit_env, author, post, "Reply", parent_comment_id=parent.id
        )
        sibling = await seed_comment(unit_env, author, post, "Sibling")
        await like_service.toggle_like(LikeTarget.COMMENT, reply.id, author.id)

        # Act
        await comment_service.delete_comment(parent.id, author.id)

        # Assert
        assert await comment_repo.find_by_id(parent.id) is None
        assert await comment_repo.find_by_id(reply.id) is None
        assert await comment_repo.find_by_id(sibling.id) is not None
        assert await like_repo.count(LikeTarget.COMMENT, reply.id) == 0

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await seed_user(unit_env, "author")
        intruder = await seed_user(unit_env, "intruder")
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        comment = await seed_comment(unit_env, author, post)

        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(comment.id, intruder.id)

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await seed_user(unit_env)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(3), author.id)
