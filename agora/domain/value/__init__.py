"""Domain value objects for Agora."""

from agora.domain.value.identifiers import (
    CommentId,
    CommunityId,
    PostId,
    UserId,
)
from agora.domain.value.types import (
    CommunityName,
    LikeTarget,
    ModerationVerdict,
    Role,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommunityId",
    "PostId",
    "CommentId",
    # Types
    "CommunityName",
    "LikeTarget",
    "ModerationVerdict",
    "Role",
    "Username",
]
