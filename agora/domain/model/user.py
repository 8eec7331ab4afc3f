"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import Role, UserId, Username


class User(DomainModel):
    """User aggregate root.

    Users own communities, posts and comments. The role is carried in the
    user's credential.
    """

    id: UserId
    username: Username
    email: str = Field(max_length=255)  # Stored lower-cased
    password_hash: str = Field(repr=False)
    role: Role = Role.USER
    profile_image: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
