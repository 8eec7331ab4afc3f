"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, func, insert, literal, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Comment, CommentView
from agora.domain.repository import CommentRepository
from agora.domain.value import CommentId, PostId, UserId
from agora.persistence.mappers import row_to_comment, row_to_comment_view
from agora.persistence.tables import (
    comment_likes_table,
    comments_table,
    posts_table,
    users_table,
)

_like_count = (
    select(func.count())
    .select_from(comment_likes_table)
    .where(comment_likes_table.c.comment_id == comments_table.c.id)
    .correlate(comments_table)
    .scalar_subquery()
)


def _liked_by(viewer_id: Optional[UserId]):
    if viewer_id is None:
        return literal(False)
    return (
        select(comment_likes_table.c.id)
        .where(
            comment_likes_table.c.comment_id == comments_table.c.id,
            comment_likes_table.c.user_id == viewer_id,
        )
        .correlate(comments_table)
        .exists()
    )


def _view_query(viewer_id: Optional[UserId] = None):
    """Comments joined with author info and like aggregate."""
    return select(
        comments_table,
        users_table.c.username,
        users_table.c.profile_image,
        _like_count.label("like_count"),
        _liked_by(viewer_id).label("liked_by_viewer"),
    ).select_from(
        comments_table.join(users_table, users_table.c.id == comments_table.c.user_id)
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_views_by_post(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> List[CommentView]:
        """Find all comments for a post, oldest first."""
        stmt = (
            _view_query(viewer_id)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_view(row._asdict()) for row in result.fetchall()]

    async def get_view(
        self, comment_id: CommentId, viewer_id: Optional[UserId] = None
    ) -> Optional[CommentView]:
        """Get a single comment with aggregates."""
        stmt = _view_query(viewer_id).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_view(row._asdict()) if row else None

    async def find_views_by_author(
        self,
        author_id: UserId,
        viewer_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[CommentView]:
        """Find comments by a specific author, newest first."""
        stmt = (
            _view_query(viewer_id)
            .add_columns(posts_table.c.title.label("post_title"))
            .join(posts_table, posts_table.c.id == comments_table.c.post_id)
            .where(comments_table.c.user_id == author_id)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_view(row._asdict()) for row in result.fetchall()]

    async def create(
        self,
        post_id: PostId,
        user_id: UserId,
        body: str,
        parent_comment_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment."""
        stmt = (
            insert(comments_table)
            .values(
                post_id=post_id,
                user_id=user_id,
                body=body,
                parent_comment_id=parent_comment_id,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace the body of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(body=body, updated_at=func.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (cascades to replies and likes)."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
