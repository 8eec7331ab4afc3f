"""In-memory community repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from agora.domain.model.community import Community, CommunityView, Member
from agora.domain.repository.community import CommunityRepository
from agora.domain.value import CommunityId, CommunityName, UserId

from .store import InMemoryStore


class InMemoryCommunityRepository(CommunityRepository):
    """In-memory implementation of CommunityRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _to_view(
        self, community: Community, viewer_id: Optional[UserId] = None
    ) -> CommunityView:
        creator = self._store.users.get(community.created_by)
        return CommunityView(
            **community.model_dump(),
            created_by_username=creator.username if creator else None,
            post_count=sum(
                1 for p in self._store.posts.values() if p.community_id == community.id
            ),
            member_count=sum(
                1 for cid, _ in self._store.memberships if cid == community.id
            ),
            is_member=(community.id, viewer_id) in self._store.memberships,
            joined_at=self._store.memberships.get((community.id, viewer_id)),
        )

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        return self._store.communities.get(community_id)

    async def find_by_name(self, name: str) -> Optional[Community]:
        """Find a community by exact name."""
        for community in self._store.communities.values():
            if community.name.root == name:
                return community
        return None

    async def get_view(
        self, community_id: CommunityId, viewer_id: Optional[UserId] = None
    ) -> Optional[CommunityView]:
        """Get a community with counts and membership flag."""
        community = self._store.communities.get(community_id)
        return self._to_view(community, viewer_id) if community else None

    async def list_views(
        self, search: Optional[str] = None, limit: int = 20, offset: int = 0
    ) -> tuple[list[CommunityView], int]:
        """List communities ordered by name."""
        communities = list(self._store.communities.values())
        if search:
            communities = [
                c for c in communities if search.lower() in c.name.root.lower()
            ]
        communities.sort(key=lambda c: c.name.root)

        page = communities[offset : offset + limit]
        return [self._to_view(c) for c in page], len(communities)

    async def list_for_member(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[CommunityView]:
        """List communities a user belongs to, most recently joined first."""
        joined = [
            (joined_at, cid)
            for (cid, uid), joined_at in self._store.memberships.items()
            if uid == user_id
        ]
        joined.sort(key=lambda item: (item[0], item[1]), reverse=True)

        return [
            self._to_view(self._store.communities[cid], user_id)
            for _, cid in joined[offset : offset + limit]
        ]

    async def create(self, name: str, created_by: UserId) -> Community:
        """Insert a community.

        Raises:
            IntegrityError: If the name is already taken
        """
        if await self.find_by_name(name):
            raise IntegrityError("Duplicate community name", None, Exception())

        community = Community(
            id=CommunityId(self._store.next_id("communities")),
            name=CommunityName(name),
            created_by=created_by,
            created_at=datetime.now(),
        )
        self._store.communities[community.id] = community
        return community

    async def update_name(
        self, community_id: CommunityId, name: str
    ) -> Optional[Community]:
        """Rename a community.

        Raises:
            IntegrityError: If another community already has the name
        """
        community = self._store.communities.get(community_id)
        if not community:
            return None
        if any(
            c.name.root == name and c.id != community_id
            for c in self._store.communities.values()
        ):
            raise IntegrityError("Duplicate community name", None, Exception())

        updated = community.model_copy(update={"name": CommunityName(name)})
        self._store.communities[community_id] = updated
        return updated

    async def delete(self, community_id: CommunityId) -> bool:
        """Delete a community with everything in it."""
        return self._store.delete_community(community_id)

    async def is_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Check membership."""
        return (community_id, user_id) in self._store.memberships

    async def add_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Add a membership unless it already exists."""
        key = (community_id, user_id)
        if key in self._store.memberships:
            return False
        self._store.memberships[key] = datetime.now()
        return True

    async def remove_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Remove a membership if present."""
        return self._store.memberships.pop((community_id, user_id), None) is not None

    async def list_members(
        self, community_id: CommunityId, limit: int = 20, offset: int = 0
    ) -> tuple[list[Member], int]:
        """List members by join date."""
        community = self._store.communities.get(community_id)
        rows = sorted(
            (joined_at, uid)
            for (cid, uid), joined_at in self._store.memberships.items()
            if cid == community_id
        )

        members = []
        for joined_at, uid in rows[offset : offset + limit]:
            user = self._store.users[uid]
            members.append(
                Member(
                    user_id=uid,
                    username=user.username,
                    email=user.email,
                    profile_image=user.profile_image,
                    joined_at=joined_at,
                    is_creator=community is not None and community.created_by == uid,
                )
            )
        return members, len(rows)
