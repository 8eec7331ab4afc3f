"""Check user exists use case."""

from pydantic import BaseModel, EmailStr

from agora.domain.service import UserService


class CheckUserRequest(BaseModel):
    """Check user request."""

    email: EmailStr


class CheckUserResponse(BaseModel):
    """Check user response."""

    exists: bool


class CheckUserUseCase:
    """Use case for checking whether an email is registered."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: CheckUserRequest) -> CheckUserResponse:
        """Execute check user flow."""
        return CheckUserResponse(
            exists=await self.user_service.email_exists(request.email)
        )
