"""Login use case."""

from pydantic import BaseModel, EmailStr

from agora.domain.service import JWTService, UserService

from .common import AuthResponse, UserItem


class LoginRequest(BaseModel):
    """Login request."""

    email: EmailStr
    password: str


class LoginUseCase:
    """Use case for exchanging credentials for a bearer token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT service for issuing the token
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            ValidationError: If the email or password is wrong
        """
        user = await self.user_service.authenticate(request.email, request.password)
        return AuthResponse(
            token=self.jwt_service.create_token(user),
            user=UserItem.from_domain(user),
        )
