"""Unit tests for GetCommentsUseCase."""

import pytest

from agora.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from tests.conftest import seed_comment, seed_community, seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_response_nests_replies(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        author = await seed_user(unit_env)
        community = await seed_community(unit_env, author)
        post = await seed_post(unit_env, author, community)
        a = await seed_comment(unit_env, author, post, "A")
        b = await seed_comment(unit_env, author, post, "B", parent_comment_id=a.id)
        c = await seed_comment(unit_env, author, post, "C")
        d = await seed_comment(unit_env, author, post, "D", parent_comment_id=b.id)

        # Act
        response = await use_case.execute(GetCommentsRequest(post_id=post.id))

        # Assert
        assert response.post_id == post.id
        assert response.total == 4
        assert [node.id for node in response.comments] == [a.id, c.id]
        reply = response.comments[0].replies[0]
        assert reply.id == b.id
        assert [node.id for node in reply.replies] == [d.id]

        dumped = response.model_dump()
        assert dumped["comments"][0]["replies"][0]["replies"][0]["body"] == "D"
