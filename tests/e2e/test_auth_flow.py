"""End-to-end tests for registration, login and the current user."""

from tests.harness import create_api_fixture

# E2E test fixture
api = create_api_fixture()


class TestAuthFlow:
    """End-to-end tests for password authentication."""

    def test_register_then_login(self, api):
        """Should issue a token at registration and again at login."""
        # Act
        token, user_id = api.register("alice")
        response = api.client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "secret123"},
        )

        # Assert
        assert token
        assert response.status_code == 200
        data = response.json()
        assert data["user"]["id"] == user_id
        assert data["user"]["username"] == "alice"
        assert data["user"]["role"] == "user"

    def test_login_with_wrong_password(self, api):
        api.register("alice")

        response = api.client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "wrong-password"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid email or password"}

    def test_register_duplicate_email(self, api):
        api.register("alice")

        response = api.client.post(
            "/auth/register",
            json={
                "username": "alice2",
                "email": "ALICE@example.com",
                "password": "secret123",
            },
        )

        assert response.status_code == 400

    def test_register_invalid_email(self, api):
        response = api.client.post(
            "/auth/register",
            json={"username": "alice", "email": "not-an-email", "password": "x"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Validation error"
        assert any("email" in error["field"] for error in data["errors"])

    def test_me_requires_token(self, api):
        response = api.client.get("/auth/me")

        assert response.status_code == 401
        assert response.json() == {"message": "Authentication required"}

    def test_me_rejects_garbage_token(self, api):
        response = api.client.get("/auth/me", headers=api.auth("not-a-jwt"))

        assert response.status_code == 401

    def test_me_and_rename(self, api):
        token, user_id = api.register("alice")

        me = api.client.get("/auth/me", headers=api.auth(token))
        renamed = api.client.put(
            "/auth/me", json={"username": "alicia"}, headers=api.auth(token)
        )

        assert me.status_code == 200
        assert me.json()["id"] == user_id
        assert renamed.status_code == 200
        assert renamed.json()["username"] == "alicia"

    def test_check_user(self, api):
        api.register("alice")

        known = api.client.post(
            "/auth/check-user", json={"email": "alice@example.com"}
        )
        unknown = api.client.post(
            "/auth/check-user", json={"email": "bob@example.com"}
        )

        assert known.json() == {"exists": True}
        assert unknown.json() == {"exists": False}


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, api):
        response = api.client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_unknown_route(self, api):
        response = api.client.get("/does-not-exist")

        assert response.status_code == 404
        assert "message" in response.json()
