"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel

from agora.application.usecase.auth import (
    AuthResponse,
    CheckUserRequest,
    CheckUserResponse,
    CheckUserUseCase,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    UpdateCurrentUserRequest,
    UpdateCurrentUserUseCase,
    UserItem,
)
from agora.domain.service import JWTService
from agora.interface.api.security import require_user_id

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class UpdateMeAPIRequest(BaseModel):
    """API request for updating the current user."""

    username: str


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create an account and return a bearer token for it.

    Args:
        request: Username, email, password and optional role
        register_use_case: Register use case from DI

    Returns:
        Token and the new user's profile
    """
    return await register_use_case.execute(request)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    return await login_use_case.execute(request)


@router.get("/me", response_model=UserItem)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserItem:
    """Get the authenticated user's profile.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await get_current_user_use_case.execute(user_id)


@router.put("/me", response_model=UserItem)
async def update_me(
    request: UpdateMeAPIRequest,
    update_current_user_use_case: FromDishka[UpdateCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserItem:
    """Change the authenticated user's username.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await update_current_user_use_case.execute(
        UpdateCurrentUserRequest(user_id=user_id, username=request.username)
    )


@router.post("/check-user", response_model=CheckUserResponse)
async def check_user(
    request: CheckUserRequest,
    check_user_use_case: FromDishka[CheckUserUseCase],
) -> CheckUserResponse:
    """Report whether an account exists for an email address."""
    return await check_user_use_case.execute(request)
