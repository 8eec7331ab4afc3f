"""Response models shared by auth use cases."""

from datetime import datetime

from pydantic import BaseModel

from agora.domain.model import User
from agora.domain.value import Role


class UserItem(BaseModel):
    """Public view of a user account."""

    id: int
    username: str
    email: str
    role: Role
    profile_image: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserItem":
        return cls(
            id=user.id,
            username=user.username.root,
            email=user.email,
            role=user.role,
            profile_image=user.profile_image,
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    """Bearer token issued for a user."""

    token: str
    user: UserItem
