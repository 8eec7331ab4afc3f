"""End-to-end tests for threaded comments, moderation and likes."""

from agora.domain.error import ModerationUnavailableError
from agora.domain.value import ModerationVerdict
from tests.harness import create_api_fixture

# E2E test fixture
api = create_api_fixture()


def _setup_post(api):
    token, user_id = api.register("alice")
    community_id = api.create_community(token, "Science")
    post_id = api.create_post(token, community_id)
    return token, user_id, post_id


class TestCommentThread:
    """End-to-end tests for building and reading a comment tree."""

    def test_nested_replies(self, api):
        """Should return top-level comments with their replies nested."""
        # Arrange
        token, _, post_id = _setup_post(api)
        a = api.create_comment(token, post_id, "A")
        b = api.create_comment(token, post_id, "B", parent_id=a)
        c = api.create_comment(token, post_id, "C", parent_id=b)
        d = api.create_comment(token, post_id, "D")

        # Act
        response = api.client.get(f"/comments/post/{post_id}")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4
        roots = data["comments"]
        assert [node["id"] for node in roots] == [a, d]
        assert [node["id"] for node in roots[0]["replies"]] == [b]
        assert [node["id"] for node in roots[0]["replies"][0]["replies"]] == [c]
        assert roots[1]["replies"] == []
        assert roots[0]["username"] == "alice"

    def test_parent_from_another_post(self, api):
        token, _, post_id = _setup_post(api)
        community_id = api.create_community(token, "Maths")
        other_post_id = api.create_post(token, community_id, "Other")
        foreign = api.create_comment(token, other_post_id, "elsewhere")

        response = api.client.post(
            f"/comments/post/{post_id}",
            json={"body": "reply", "parent_comment_id": foreign},
            headers=api.auth(token),
        )

        assert response.status_code == 400

    def test_unknown_post(self, api):
        token, _ = api.register("alice")

        response = api.client.post(
            "/comments/post/999",
            json={"body": "hello"},
            headers=api.auth(token),
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}

    def test_blank_body(self, api):
        token, _, post_id = _setup_post(api)

        response = api.client.post(
            f"/comments/post/{post_id}",
            json={"body": "   "},
            headers=api.auth(token),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Validation error"

    def test_requires_authentication(self, api):
        _, _, post_id = _setup_post(api)

        response = api.client.post(f"/comments/post/{post_id}", json={"body": "hi"})

        assert response.status_code == 401

    def test_only_author_can_edit(self, api):
        token, _, post_id = _setup_post(api)
        other_token, _ = api.register("mallory")
        comment_id = api.create_comment(token, post_id, "mine")

        forbidden = api.client.put(
            f"/comments/{comment_id}",
            json={"body": "hijacked"},
            headers=api.auth(other_token),
        )
        edited = api.client.put(
            f"/comments/{comment_id}",
            json={"body": "edited"},
            headers=api.auth(token),
        )

        assert forbidden.status_code == 403
        assert edited.status_code == 200
        assert edited.json()["body"] == "edited"

    def test_delete_removes_replies(self, api):
        token, _, post_id = _setup_post(api)
        parent = api.create_comment(token, post_id, "parent")
        api.create_comment(token, post_id, "child", parent_id=parent)

        response = api.client.delete(
            f"/comments/{parent}", headers=api.auth(token)
        )
        thread = api.client.get(f"/comments/post/{post_id}").json()

        assert response.status_code == 200
        assert thread["total"] == 0
        assert thread["comments"] == []


class TestCommentModeration:
    """End-to-end tests for the toxicity gate on comments."""

    def test_rejected_comment_is_not_stored(self, api):
        """Should answer 400 with the scores and store nothing."""
        token, _, post_id = _setup_post(api)
        api.toxicity_client.verdict = ModerationVerdict(
            allowed=False, scores={"toxic": 0.97, "insult": 0.88}
        )

        response = api.client.post(
            f"/comments/post/{post_id}",
            json={"body": "you are all idiots"},
            headers=api.auth(token),
        )
        thread = api.client.get(f"/comments/post/{post_id}").json()

        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Comment rejected due to toxic content"
        assert data["toxicity"] == {"toxic": 0.97, "insult": 0.88}
        assert thread["total"] == 0
        assert api.toxicity_client.calls == ["you are all idiots"]

    def test_unavailable_scorer_allows_comment(self, api):
        token, _, post_id = _setup_post(api)
        api.toxicity_client.error = ModerationUnavailableError("timed out")

        response = api.client.post(
            f"/comments/post/{post_id}",
            json={"body": "a perfectly nice comment"},
            headers=api.auth(token),
        )

        assert response.status_code == 201
        assert response.json()["replies"] == []


class TestLikes:
    """End-to-end tests for like toggling."""

    def test_post_like_toggles(self, api):
        token, _, post_id = _setup_post(api)

        first = api.client.post(f"/posts/{post_id}/like", headers=api.auth(token))
        liked_view = api.client.get(f"/posts/{post_id}", headers=api.auth(token))
        second = api.client.post(f"/posts/{post_id}/like", headers=api.auth(token))

        assert first.json() == {"liked": True, "like_count": 1}
        assert liked_view.json()["liked_by_viewer"] is True
        assert second.json() == {"liked": False, "like_count": 0}

    def test_comment_like_counts_per_user(self, api):
        token, _, post_id = _setup_post(api)
        other_token, _ = api.register("bob")
        comment_id = api.create_comment(token, post_id, "likeable")

        api.client.post(f"/comments/{comment_id}/like", headers=api.auth(token))
        response = api.client.post(
            f"/comments/{comment_id}/like", headers=api.auth(other_token)
        )
        thread = api.client.get(
            f"/comments/post/{post_id}", headers=api.auth(other_token)
        ).json()

        assert response.json() == {"liked": True, "like_count": 2}
        assert thread["comments"][0]["like_count"] == 2
        assert thread["comments"][0]["liked_by_viewer"] is True

    def test_like_unknown_comment(self, api):
        token, _ = api.register("alice")

        response = api.client.post("/comments/999/like", headers=api.auth(token))

        assert response.status_code == 404
