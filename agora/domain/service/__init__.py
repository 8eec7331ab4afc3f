"""Domain services."""

from .authorization import ensure_owner
from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_tree
from .community_service import CommunityService
from .jwt_service import JWTService
from .like_service import LikeService
from .moderation_service import ModerationService, ToxicityClient
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "CommentNode",
    "CommentService",
    "CommunityService",
    "JWTService",
    "LikeService",
    "ModerationService",
    "PostService",
    "Service",
    "ToxicityClient",
    "UserService",
    "build_comment_tree",
    "ensure_owner",
]
