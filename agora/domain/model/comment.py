"""Comment entity.

Comments are threaded discussions on posts with unlimited depth. Threading
is stored as a nullable parent reference; the tree is rebuilt on read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CommentId, PostId, UserId, Username


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.
    Invariants:
    - parent_comment_id, when set, points to a comment of the same post
    - the parent chain is finite and acyclic (parents must already exist)
    """

    id: CommentId
    body: str = Field(min_length=1, max_length=1000)
    post_id: PostId
    user_id: UserId
    parent_comment_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class CommentView(Comment):
    """Comment row annotated at fetch time.

    like_count and liked_by_viewer come from a join/aggregate over the
    comment likes, never from the tree builder.
    """

    username: Optional[Username] = None
    profile_image: Optional[str] = None
    post_title: Optional[str] = None  # Only set for per-user listings
    like_count: int = Field(default=0, ge=0)
    liked_by_viewer: bool = False
