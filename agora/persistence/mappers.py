"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
from SQLAlchemy Core rows. View rows carry the extra joined/aggregated
columns selected by the repositories.
"""

from typing import Any, Dict

from agora.domain.model import (
    Comment,
    CommentView,
    Community,
    CommunityView,
    Member,
    Post,
    PostView,
    User,
)
from agora.domain.value import (
    CommentId,
    CommunityId,
    CommunityName,
    PostId,
    Role,
    UserId,
    Username,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        profile_image=row.get("profile_image"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_community(row: Dict[str, Any]) -> Community:
    """Convert database row to Community domain model."""
    return Community(
        id=CommunityId(row["id"]),
        name=CommunityName(row["name"]),
        created_by=UserId(row["created_by"]),
        created_at=row["created_at"],
    )


def row_to_community_view(row: Dict[str, Any]) -> CommunityView:
    """Convert an aggregated community row to CommunityView."""
    creator = row.get("created_by_username")
    return CommunityView(
        id=CommunityId(row["id"]),
        name=CommunityName(row["name"]),
        created_by=UserId(row["created_by"]),
        created_at=row["created_at"],
        created_by_username=Username(creator) if creator else None,
        post_count=row.get("post_count") or 0,
        member_count=row.get("member_count") or 0,
        is_member=bool(row.get("is_member")),
        joined_at=row.get("joined_at"),
    )


def row_to_member(row: Dict[str, Any]) -> Member:
    """Convert a membership row joined with its user to Member."""
    return Member(
        user_id=UserId(row["user_id"]),
        username=Username(row["username"]),
        email=row["email"],
        profile_image=row.get("profile_image"),
        joined_at=row["joined_at"],
        is_creator=bool(row.get("is_creator")),
    )


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        body=row.get("body"),
        image=row.get("image"),
        community_id=CommunityId(row["community_id"]),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_post_view(row: Dict[str, Any]) -> PostView:
    """Convert an aggregated post row to PostView."""
    community_name = row.get("community_name")
    username = row.get("username")
    return PostView(
        **row_to_post(row).model_dump(),
        username=Username(username) if username else None,
        community_name=CommunityName(community_name) if community_name else None,
        like_count=row.get("like_count") or 0,
        comment_count=row.get("comment_count") or 0,
        liked_by_viewer=bool(row.get("liked_by_viewer")),
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_comment_id")
    return Comment(
        id=CommentId(row["id"]),
        body=row["body"],
        post_id=PostId(row["post_id"]),
        user_id=UserId(row["user_id"]),
        parent_comment_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_comment_view(row: Dict[str, Any]) -> CommentView:
    """Convert an aggregated comment row to CommentView."""
    username = row.get("username")
    return CommentView(
        **row_to_comment(row).model_dump(),
        username=Username(username) if username else None,
        profile_image=row.get("profile_image"),
        post_title=row.get("post_title"),
        like_count=row.get("like_count") or 0,
        liked_by_viewer=bool(row.get("liked_by_viewer")),
    )
