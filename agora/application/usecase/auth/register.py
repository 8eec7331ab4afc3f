"""Register use case."""

from pydantic import BaseModel, EmailStr, Field

from agora.domain.service import JWTService, UserService

from .common import AuthResponse, UserItem


class RegisterRequest(BaseModel):
    """Register request."""

    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)
    role: str | None = None  # "user" or "moderator"; anything else means "user"


class RegisterUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT service for issuing the token
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute register flow.

        Raises:
            ValidationError: If the username or password is malformed
            ConflictError: If the email or username is taken
        """
        user = await self.user_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
            role=request.role,
        )
        return AuthResponse(
            token=self.jwt_service.create_token(user),
            user=UserItem.from_domain(user),
        )
