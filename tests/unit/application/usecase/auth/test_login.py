"""Unit tests for RegisterUseCase and LoginUseCase."""

from dishka import AsyncContainer
import pytest

from agora.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from agora.domain.error import ValidationError
from agora.domain.service import JWTService
from agora.domain.value import Role
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterAndLogin:
    """Tests for the register/login pair."""

    @pytest.mark.asyncio
    async def test_register_returns_token_for_new_user(self, unit_env: AsyncContainer):
        # Arrange
        register_use_case = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await register_use_case.execute(
            RegisterRequest(
                username="ada", email="ada@example.com", password="engine42"
            )
        )

        # Assert
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == response.user.id
        assert payload.role == "user"
        assert response.user.username == "ada"
        assert response.user.role == Role.USER

    @pytest.mark.asyncio
    async def test_login_with_registered_credentials(self, unit_env: AsyncContainer):
        register_use_case = await unit_env.get(RegisterUseCase)
        login_use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        registered = await register_use_case.execute(
            RegisterRequest(
                username="grace",
                email="grace@example.com",
                password="cobol1959",
                role="moderator",
            )
        )

        response = await login_use_case.execute(
            LoginRequest(email="grace@example.com", password="cobol1959")
        )

        assert response.user.id == registered.user.id
        assert jwt_service.verify_token(response.token).role == "moderator"

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, unit_env: AsyncContainer):
        register_use_case = await unit_env.get(RegisterUseCase)
        login_use_case = await unit_env.get(LoginUseCase)
        await register_use_case.execute(
            RegisterRequest(
                username="grace", email="grace@example.com", password="cobol1959"
            )
        )

        with pytest.raises(ValidationError, match="Invalid email or password"):
            await login_use_case.execute(
                LoginRequest(email="grace@example.com", password="fortran")
            )
