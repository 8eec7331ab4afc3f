"""Response models shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from agora.domain.model import CommentView
from agora.domain.service import CommentNode


class CommentItem(BaseModel):
    """Comment item in response."""

    id: int
    body: str
    post_id: int
    user_id: int
    parent_comment_id: int | None
    username: str | None
    profile_image: str | None
    like_count: int
    liked_by_viewer: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_view(cls, view: CommentView) -> "CommentItem":
        return cls(
            id=view.id,
            body=view.body,
            post_id=view.post_id,
            user_id=view.user_id,
            parent_comment_id=view.parent_comment_id,
            username=view.username.root if view.username else None,
            profile_image=view.profile_image,
            like_count=view.like_count,
            liked_by_viewer=view.liked_by_viewer,
            created_at=view.created_at,
            updated_at=view.updated_at,
        )


class CommentNodeResponse(CommentItem):
    """Comment with its nested replies.

    Recursive structure mirroring the domain tree.
    """

    replies: list["CommentNodeResponse"]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentNodeResponse":
        """Convert domain CommentNode to response model.

        Args:
            node: Domain comment node

        Returns:
            API response model with replies recursively converted
        """
        return cls(
            **CommentItem.from_view(node.view).model_dump(),
            replies=[cls.from_domain(reply) for reply in node.replies],
        )
