"""Domain model entities for Agora."""

from agora.domain.model.comment import Comment, CommentView
from agora.domain.model.community import Community, CommunityView, Member
from agora.domain.model.like import LikeState
from agora.domain.model.post import Post, PostView
from agora.domain.model.user import User

__all__ = [
    "User",
    "Community",
    "CommunityView",
    "Member",
    "Post",
    "PostView",
    "Comment",
    "CommentView",
    "LikeState",
]
