"""Unit tests for UpdateCommentUseCase."""

import pytest

from agora.application.usecase.comment import (
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from agora.domain.error import ContentRejectedError, NotAuthorizedError
from agora.domain.repository import CommentRepository
from agora.domain.service import ToxicityClient
from agora.domain.value import ModerationVerdict
from tests.conftest import seed_comment, seed_community, seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_edits_comment(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        comment = await seed_comment(unit_env, author, post, "Original")

        response = await use_case.execute(
            UpdateCommentRequest(
                comment_id=comment.id, user_id=author.id, body="Edited"
            )
        )

        assert response.id == comment.id
        assert response.body == "Edited"

    @pytest.mark.asyncio
    async def test_toxic_edit_is_rejected_and_body_unchanged(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        toxicity_client = await unit_env.get(ToxicityClient)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        comment = await seed_comment(unit_env, author, post, "Original")
        toxicity_client.verdict = ModerationVerdict(
            allowed=False, scores={"toxicity": 0.97}
        )

        with pytest.raises(ContentRejectedError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=comment.id, user_id=author.id, body="nasty"
                )
            )

        stored = await comment_repo.find_by_id(comment.id)
        assert stored.body == "Original"

    @pytest.mark.asyncio
    async def test_non_author_is_refused_before_moderation(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        toxicity_client = await unit_env.get(ToxicityClient)
        author = await seed_user(unit_env, "author")
        intruder = await seed_user(unit_env, "intruder")
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        comment = await seed_comment(unit_env, author, post)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=comment.id, user_id=intruder.id, body="mine"
                )
            )

        assert toxicity_client.calls == []
