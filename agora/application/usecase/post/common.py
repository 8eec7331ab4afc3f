"""Response models shared by post use cases."""

from datetime import datetime

from pydantic import BaseModel

from agora.domain.model import PostView


class PostItem(BaseModel):
    """Post item in response."""

    id: int
    title: str
    body: str | None
    image: str | None
    community_id: int
    community_name: str | None
    user_id: int
    username: str | None
    like_count: int
    comment_count: int
    liked_by_viewer: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_view(cls, view: PostView) -> "PostItem":
        return cls(
            id=view.id,
            title=view.title,
            body=view.body,
            image=view.image,
            community_id=view.community_id,
            community_name=view.community_name.root if view.community_name else None,
            user_id=view.user_id,
            username=view.username.root if view.username else None,
            like_count=view.like_count,
            comment_count=view.comment_count,
            liked_by_viewer=view.liked_by_viewer,
            created_at=view.created_at,
            updated_at=view.updated_at,
        )
