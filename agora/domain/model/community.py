"""Community aggregate and membership read models.

A community has an immutable creator and a set of member users. The creator
joins on creation and cannot leave.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CommunityId, CommunityName, UserId, Username


class Community(DomainModel):
    """Community aggregate root."""

    id: CommunityId
    name: CommunityName
    created_by: UserId
    created_at: datetime = Field(default_factory=datetime.now)


class CommunityView(Community):
    """Community annotated with aggregates for listing and detail pages."""

    created_by_username: Optional[Username] = None
    post_count: int = Field(default=0, ge=0)
    member_count: int = Field(default=0, ge=0)
    is_member: bool = False
    joined_at: Optional[datetime] = None  # Set when listed for a member


class Member(DomainModel):
    """A user's membership in a community."""

    user_id: UserId
    username: Username
    email: str
    profile_image: Optional[str] = None
    joined_at: datetime
    is_creator: bool = False
