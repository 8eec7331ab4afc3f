"""Authentication and account use cases."""

from .check_user import CheckUserRequest, CheckUserResponse, CheckUserUseCase
from .common import AuthResponse, UserItem
from .current_user import (
    GetCurrentUserUseCase,
    UpdateCurrentUserRequest,
    UpdateCurrentUserUseCase,
)
from .login import LoginRequest, LoginUseCase
from .register import RegisterRequest, RegisterUseCase

__all__ = [
    "AuthResponse",
    "CheckUserRequest",
    "CheckUserResponse",
    "CheckUserUseCase",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
    "UpdateCurrentUserRequest",
    "UpdateCurrentUserUseCase",
    "UserItem",
]
