"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CommunityId, CommunityName, PostId, UserId, Username


class Post(DomainModel):
    """Post aggregate root.

    A post lives in exactly one community and is owned by its author.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=255)
    body: Optional[str] = Field(default=None, max_length=5000)
    image: Optional[str] = None  # Reference to stored upload, not managed here
    community_id: CommunityId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class PostView(Post):
    """Post joined with author, community and like/comment aggregates."""

    username: Optional[Username] = None
    community_name: Optional[CommunityName] = None
    like_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    liked_by_viewer: bool = False
