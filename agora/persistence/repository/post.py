"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import delete, desc, func, insert, literal, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Post, PostView
from agora.domain.repository import PostRepository
from agora.domain.value import CommunityId, PostId, UserId
from agora.persistence.mappers import row_to_post, row_to_post_view
from agora.persistence.query import LIKE_ESCAPE, contains_pattern
from agora.persistence.tables import (
    comments_table,
    communities_table,
    post_likes_table,
    posts_table,
    users_table,
)

_like_count = (
    select(func.count())
    .select_from(post_likes_table)
    .where(post_likes_table.c.post_id == posts_table.c.id)
    .correlate(posts_table)
    .scalar_subquery()
)

_comment_count = (
    select(func.count())
    .select_from(comments_table)
    .where(comments_table.c.post_id == posts_table.c.id)
    .correlate(posts_table)
    .scalar_subquery()
)


def _liked_by(viewer_id: Optional[UserId]):
    if viewer_id is None:
        return literal(False)
    return (
        select(post_likes_table.c.id)
        .where(
            post_likes_table.c.post_id == posts_table.c.id,
            post_likes_table.c.user_id == viewer_id,
        )
        .correlate(posts_table)
        .exists()
    )


def _view_query(viewer_id: Optional[UserId] = None):
    """Posts joined with author, community and like/comment aggregates."""
    return select(
        posts_table,
        users_table.c.username,
        communities_table.c.name.label("community_name"),
        _like_count.label("like_count"),
        _comment_count.label("comment_count"),
        _liked_by(viewer_id).label("liked_by_viewer"),
    ).select_from(
        posts_table.join(users_table, users_table.c.id == posts_table.c.user_id).join(
            communities_table, communities_table.c.id == posts_table.c.community_id
        )
    )


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def get_view(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> Optional[PostView]:
        """Get a post with aggregates."""
        stmt = _view_query(viewer_id).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post_view(row._asdict()) if row else None

    async def list_views(
        self,
        viewer_id: Optional[UserId] = None,
        community_id: Optional[CommunityId] = None,
        author_id: Optional[UserId] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[PostView], int]:
        """List posts newest first with optional filters."""
        filters = []
        if community_id is not None:
            filters.append(posts_table.c.community_id == community_id)
        if author_id is not None:
            filters.append(posts_table.c.user_id == author_id)
        if search:
            pattern = contains_pattern(search)
            filters.append(
                or_(
                    posts_table.c.title.ilike(pattern, escape=LIKE_ESCAPE),
                    posts_table.c.body.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )

        count_stmt = select(func.count()).select_from(posts_table).where(*filters)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            _view_query(viewer_id)
            .where(*filters)
            .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post_view(row._asdict()) for row in result.fetchall()], total

    async def create(
        self,
        title: str,
        body: Optional[str],
        image: Optional[str],
        community_id: CommunityId,
        user_id: UserId,
    ) -> Post:
        """Insert a new post."""
        stmt = (
            insert(posts_table)
            .values(
                title=title,
                body=body,
                image=image,
                community_id=community_id,
                user_id=user_id,
            )
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_post(row._asdict())

    async def update(
        self,
        post_id: PostId,
        title: Optional[str] = None,
        body: Optional[str] = None,
        image: Optional[str] = None,
    ) -> Optional[Post]:
        """Partially update a post."""
        values = {
            key: value
            for key, value in (("title", title), ("body", body), ("image", image))
            if value is not None
        }
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(**values, updated_at=func.now())
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_post(row._asdict())

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (cascades to comments and likes)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
