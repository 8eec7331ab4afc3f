"""Community repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.community import Community, CommunityView, Member
from agora.domain.value import CommunityId, UserId


class CommunityRepository(ABC):
    """Repository for Community aggregate and its memberships."""

    @abstractmethod
    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Community]:
        """Find a community by exact name."""
        pass

    @abstractmethod
    async def get_view(
        self, community_id: CommunityId, viewer_id: Optional[UserId] = None
    ) -> Optional[CommunityView]:
        """Get a community with post/member counts.

        Args:
            community_id: Community ID
            viewer_id: Optional viewer, used to compute is_member

        Returns:
            Community view if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_views(
        self, search: Optional[str] = None, limit: int = 20, offset: int = 0
    ) -> tuple[list[CommunityView], int]:
        """List communities ordered by name.

        Args:
            search: Optional case-insensitive substring filter on the name
            limit: Page size
            offset: Number of communities to skip

        Returns:
            Tuple of (page of community views, total matching count)
        """
        pass

    @abstractmethod
    async def list_for_member(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[CommunityView]:
        """List communities a user belongs to, most recently joined first."""
        pass

    @abstractmethod
    async def create(self, name: str, created_by: UserId) -> Community:
        """Insert a new community.

        Raises:
            IntegrityError: If the name is already taken
        """
        pass

    @abstractmethod
    async def update_name(
        self, community_id: CommunityId, name: str
    ) -> Optional[Community]:
        """Rename a community. Returns None if it doesn't exist."""
        pass

    @abstractmethod
    async def delete(self, community_id: CommunityId) -> bool:
        """Delete a community.

        Posts, their comments and likes, and memberships are removed by
        cascade.

        Returns:
            True if a community was deleted
        """
        pass

    @abstractmethod
    async def is_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Check whether a user belongs to a community."""
        pass

    @abstractmethod
    async def add_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Add a membership.

        Returns:
            True if inserted, False if the membership already existed
        """
        pass

    @abstractmethod
    async def remove_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Remove a membership.

        Returns:
            True if removed, False if there was nothing to remove
        """
        pass

    @abstractmethod
    async def list_members(
        self, community_id: CommunityId, limit: int = 20, offset: int = 0
    ) -> tuple[list[Member], int]:
        """List members by join date (oldest first).

        Returns:
            Tuple of (page of members, total member count)
        """
        pass
