"""PostgreSQL implementation of Like repository."""

from sqlalchemy import Column, Table, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.repository import LikeRepository
from agora.domain.value import LikeTarget, UserId
from agora.persistence.tables import (
    comment_likes_table,
    comments_table,
    post_likes_table,
    posts_table,
)

# target -> (liked entity table, like table, like table's target column)
_TABLES: dict[LikeTarget, tuple[Table, Table, Column]] = {
    LikeTarget.POST: (posts_table, post_likes_table, post_likes_table.c.post_id),
    LikeTarget.COMMENT: (
        comments_table,
        comment_likes_table,
        comment_likes_table.c.comment_id,
    ),
}


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def lock_target(self, target: LikeTarget, target_id: int) -> bool:
        """SELECT ... FOR UPDATE on the liked entity's row."""
        entity_table, _, _ = _TABLES[target]
        stmt = (
            select(entity_table.c.id)
            .where(entity_table.c.id == target_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def add(self, target: LikeTarget, target_id: int, user_id: UserId) -> bool:
        """Insert a like, ignoring an existing one."""
        _, like_table, target_column = _TABLES[target]
        stmt = (
            insert(like_table)
            .values({target_column.name: target_id, "user_id": user_id})
            .on_conflict_do_nothing(
                index_elements=[target_column, like_table.c.user_id]
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def remove(
        self, target: LikeTarget, target_id: int, user_id: UserId
    ) -> bool:
        """Delete a like if present."""
        _, like_table, target_column = _TABLES[target]
        stmt = delete(like_table).where(
            target_column == target_id, like_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def count(self, target: LikeTarget, target_id: int) -> int:
        """Count likes on a target."""
        _, like_table, target_column = _TABLES[target]
        stmt = (
            select(func.count())
            .select_from(like_table)
            .where(target_column == target_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
