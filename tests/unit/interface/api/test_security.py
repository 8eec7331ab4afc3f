"""Unit tests for bearer credential extraction."""

import pytest

from agora.domain.error import AuthenticationError
from agora.domain.service import JWTService
from agora.interface.api.security import (
    extract_bearer_token,
    optional_user_id,
    require_user_id,
)
from tests.conftest import seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestExtractBearerToken:
    """Tests for extract_bearer_token."""

    def test_reads_token(self):
        assert extract_bearer_token("Bearer abc.def") == "abc.def"

    def test_scheme_is_case_insensitive(self):
        assert extract_bearer_token("bearer abc.def") == "abc.def"

    @pytest.mark.parametrize("header", [None, "", "Basic dXNlcjpwdw==", "Bearer   "])
    def test_missing_or_other_scheme(self, header):
        assert extract_bearer_token(header) is None


class TestResolveUser:
    """Tests for require_user_id and optional_user_id."""

    @pytest.mark.asyncio
    async def test_valid_token(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        user = await seed_user(unit_env)
        header = f"Bearer {jwt_service.create_token(user)}"

        assert require_user_id(jwt_service, header) == user.id
        assert optional_user_id(jwt_service, header) == user.id

    @pytest.mark.asyncio
    async def test_missing_token(self, unit_env):
        jwt_service = await unit_env.get(JWTService)

        with pytest.raises(AuthenticationError, match="Authentication required"):
            require_user_id(jwt_service, None)
        assert optional_user_id(jwt_service, None) is None

    @pytest.mark.asyncio
    async def test_garbage_token(self, unit_env):
        """Invalid tokens are rejected where required, anonymous otherwise."""
        jwt_service = await unit_env.get(JWTService)

        with pytest.raises(AuthenticationError):
            require_user_id(jwt_service, "Bearer not-a-jwt")
        assert optional_user_id(jwt_service, "Bearer not-a-jwt") is None
