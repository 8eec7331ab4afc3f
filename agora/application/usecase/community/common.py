"""Response models shared by community use cases."""

from datetime import datetime

from pydantic import BaseModel

from agora.domain.model import CommunityView


class CommunityItem(BaseModel):
    """Community item in response."""

    id: int
    name: str
    created_by: int
    created_by_username: str | None
    post_count: int
    member_count: int
    is_member: bool
    joined_at: datetime | None
    created_at: datetime

    @classmethod
    def from_view(cls, view: CommunityView) -> "CommunityItem":
        return cls(
            id=view.id,
            name=view.name.root,
            created_by=view.created_by,
            created_by_username=(
                view.created_by_username.root if view.created_by_username else None
            ),
            post_count=view.post_count,
            member_count=view.member_count,
            is_member=view.is_member,
            joined_at=view.joined_at,
            created_at=view.created_at,
        )


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
