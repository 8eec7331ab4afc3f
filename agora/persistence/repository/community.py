"""PostgreSQL implementation of Community repository."""

from typing import Optional

from sqlalchemy import delete, desc, func, literal, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Community, CommunityView, Member
from agora.domain.repository import CommunityRepository
from agora.domain.value import CommunityId, UserId
from agora.persistence.mappers import (
    row_to_community,
    row_to_community_view,
    row_to_member,
)
from agora.persistence.query import LIKE_ESCAPE, contains_pattern
from agora.persistence.tables import (
    communities_table,
    posts_table,
    user_communities_table,
    users_table,
)

_post_count = (
    select(func.count())
    .select_from(posts_table)
    .where(posts_table.c.community_id == communities_table.c.id)
    .correlate(communities_table)
    .scalar_subquery()
)

_member_count = (
    select(func.count())
    .select_from(user_communities_table)
    .where(user_communities_table.c.community_id == communities_table.c.id)
    .correlate(communities_table)
    .scalar_subquery()
)


def _is_member(viewer_id: Optional[UserId]):
    if viewer_id is None:
        return literal(False)
    return (
        select(user_communities_table.c.id)
        .where(
            user_communities_table.c.community_id == communities_table.c.id,
            user_communities_table.c.user_id == viewer_id,
        )
        .correlate(communities_table)
        .exists()
    )


def _view_query(viewer_id: Optional[UserId] = None):
    """Communities joined with creator username and counts."""
    return select(
        communities_table,
        users_table.c.username.label("created_by_username"),
        _post_count.label("post_count"),
        _member_count.label("member_count"),
        _is_member(viewer_id).label("is_member"),
    ).select_from(
        communities_table.join(
            users_table, users_table.c.id == communities_table.c.created_by
        )
    )


class PostgresCommunityRepository(CommunityRepository):
    """PostgreSQL implementation of CommunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        stmt = select(communities_table).where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_community(row._asdict()) if row else None

    async def find_by_name(self, name: str) -> Optional[Community]:
        """Find a community by exact name."""
        stmt = select(communities_table).where(communities_table.c.name == name)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_community(row._asdict()) if row else None

    async def get_view(
        self, community_id: CommunityId, viewer_id: Optional[UserId] = None
    ) -> Optional[CommunityView]:
        """Get a community with counts and membership flag."""
        stmt = _view_query(viewer_id).where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_community_view(row._asdict()) if row else None

    async def list_views(
        self, search: Optional[str] = None, limit: int = 20, offset: int = 0
    ) -> tuple[list[CommunityView], int]:
        """List communities ordered by name."""
        filters = []
        if search:
            filters.append(
                communities_table.c.name.ilike(
                    contains_pattern(search), escape=LIKE_ESCAPE
                )
            )

        count_stmt = select(func.count()).select_from(communities_table).where(*filters)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            _view_query()
            .where(*filters)
            .order_by(communities_table.c.name)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        communities = [
            row_to_community_view(row._asdict()) for row in result.fetchall()
        ]
        return communities, total

    async def list_for_member(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[CommunityView]:
        """List communities a user belongs to, most recently joined first."""
        stmt = (
            _view_query(user_id)
            .add_columns(user_communities_table.c.joined_at)
            .join(
                user_communities_table,
                user_communities_table.c.community_id == communities_table.c.id,
            )
            .where(user_communities_table.c.user_id == user_id)
            .order_by(desc(user_communities_table.c.joined_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_community_view(row._asdict()) for row in result.fetchall()]

    async def create(self, name: str, created_by: UserId) -> Community:
        """Insert a new community."""
        stmt = (
            communities_table.insert()
            .values(name=name, created_by=created_by)
            .returning(communities_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_community(row._asdict())

    async def update_name(
        self, community_id: CommunityId, name: str
    ) -> Optional[Community]:
        """Rename a community."""
        stmt = (
            update(communities_table)
            .where(communities_table.c.id == community_id)
            .values(name=name)
            .returning(communities_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_community(row._asdict())

    async def delete(self, community_id: CommunityId) -> bool:
        """Delete a community (cascades to posts and memberships)."""
        stmt = delete(communities_table).where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def is_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Check membership."""
        stmt = select(user_communities_table.c.id).where(
            user_communities_table.c.community_id == community_id,
            user_communities_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def add_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Add a membership unless it already exists."""
        stmt = (
            insert(user_communities_table)
            .values(community_id=community_id, user_id=user_id)
            .on_conflict_do_nothing(constraint="uq_user_community")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def remove_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Remove a membership if present."""
        stmt = delete(user_communities_table).where(
            user_communities_table.c.community_id == community_id,
            user_communities_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def list_members(
        self, community_id: CommunityId, limit: int = 20, offset: int = 0
    ) -> tuple[list[Member], int]:
        """List members by join date."""
        count_stmt = (
            select(func.count())
            .select_from(user_communities_table)
            .where(user_communities_table.c.community_id == community_id)
        )
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(
                users_table.c.id.label("user_id"),
                users_table.c.username,
                users_table.c.email,
                users_table.c.profile_image,
                user_communities_table.c.joined_at,
                (communities_table.c.created_by == users_table.c.id).label(
                    "is_creator"
                ),
            )
            .select_from(
                user_communities_table.join(
                    users_table, users_table.c.id == user_communities_table.c.user_id
                ).join(
                    communities_table,
                    communities_table.c.id == user_communities_table.c.community_id,
                )
            )
            .where(user_communities_table.c.community_id == community_id)
            .order_by(user_communities_table.c.joined_at, users_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_member(row._asdict()) for row in result.fetchall()], total
