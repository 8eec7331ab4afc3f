"""Unit tests for CreateCommentUseCase."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from agora.domain.error import (
    ContentRejectedError,
    ModerationUnavailableError,
    NotFoundError,
    ValidationError,
)
from agora.domain.repository import CommentRepository
from agora.domain.service import ToxicityClient
from agora.domain.value import ModerationVerdict
from tests.conftest import seed_comment, seed_community, seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_creates_node_with_author_and_empty_replies(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        author = await seed_user(unit_env, "author")
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(post_id=post.id, user_id=author.id, body="Nice!")
        )

        # Assert
        assert response.body == "Nice!"
        assert response.post_id == post.id
        assert response.username == "author"
        assert response.like_count == 0
        assert response.liked_by_viewer is False
        assert response.replies == []

    @pytest.mark.asyncio
    async def test_body_is_stripped(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)

        response = await use_case.execute(
            CreateCommentRequest(post_id=post.id, user_id=author.id, body="  hi  ")
        )

        assert response.body == "hi"

    def test_blank_or_oversized_body_is_invalid(self):
        with pytest.raises(PydanticValidationError):
            CreateCommentRequest(post_id=1, user_id=1, body="   ")
        with pytest.raises(PydanticValidationError):
            CreateCommentRequest(post_id=1, user_id=1, body="x" * 1001)
        with pytest.raises(PydanticValidationError):
            CreateCommentRequest(post_id=1, user_id=1, body="ok", parent_comment_id=0)

    @pytest.mark.asyncio
    async def test_toxic_comment_is_rejected_with_scores_and_not_stored(
        self, unit_env
    ):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        toxicity_client = await unit_env.get(ToxicityClient)
        toxicity_client.verdict = ModerationVerdict(
            allowed=False, scores={"toxicity": 0.93, "insult": 0.88}
        )
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)

        # Act
        with pytest.raises(ContentRejectedError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    post_id=post.id, user_id=author.id, body="you are an idiot"
                )
            )

        # Assert
        assert exc_info.value.scores == {"toxicity": 0.93, "insult": 0.88}
        assert await comment_repo.find_views_by_post(post.id) == []

    @pytest.mark.asyncio
    async def test_scorer_timeout_still_stores_comment(self, unit_env):
        """With the scorer down the gate fails open and the comment is kept."""
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        toxicity_client = await unit_env.get(ToxicityClient)
        toxicity_client.error = ModerationUnavailableError("timed out")
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)

        response = await use_case.execute(
            CreateCommentRequest(post_id=post.id, user_id=author.id, body="hello")
        )

        rows = await comment_repo.find_views_by_post(post.id)
        assert [row.id for row in rows] == [response.id]

    @pytest.mark.asyncio
    async def test_moderation_runs_before_post_lookup(self, unit_env):
        """Text is scored even when the post turns out not to exist."""
        use_case = await unit_env.get(CreateCommentUseCase)
        toxicity_client = await unit_env.get(ToxicityClient)
        author = await seed_user(unit_env)

        with pytest.raises(NotFoundError, match="Post not found"):
            await use_case.execute(
                CreateCommentRequest(post_id=404, user_id=author.id, body="hello")
            )

        assert toxicity_client.calls == ["hello"]

    @pytest.mark.asyncio
    async def test_cross_post_parent_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post_a = await seed_post(unit_env, author, community, title="A")
        post_b = await seed_post(unit_env, author, community, title="B")
        parent = await seed_comment(unit_env, author, post_a)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=post_b.id,
                    user_id=author.id,
                    body="reply",
                    parent_comment_id=parent.id,
                )
            )

        assert await comment_repo.find_views_by_post(post_b.id) == []
