"""Community domain service."""

from typing import Optional

import logfire
from sqlalchemy.exc import IntegrityError

from agora.domain.error import (
    BusinessRuleViolationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from agora.domain.model.community import Community, CommunityView, Member
from agora.domain.repository import CommunityRepository
from agora.domain.value import CommunityId, CommunityName, UserId

from .authorization import ensure_owner
from .base import Service


def _parse_name(name: str) -> CommunityName:
    try:
        return CommunityName(name)
    except ValueError as e:
        raise ValidationError(
            "Community name must be 3-100 characters of letters, numbers, "
            "spaces, hyphens or underscores"
        ) from e


class CommunityService(Service):
    """Domain service for communities and memberships."""

    def __init__(self, community_repository: CommunityRepository) -> None:
        """Initialize community service.

        Args:
            community_repository: Community repository
        """
        self.community_repository = community_repository

    async def create_community(self, name: str, created_by: UserId) -> Community:
        """Create a community; the creator becomes its first member.

        Args:
            name: Community name
            created_by: Creating user's ID

        Returns:
            Created community

        Raises:
            ValidationError: If the name is malformed
            ConflictError: If the name is already taken
        """
        community_name = _parse_name(name)
        with logfire.span(
            "community_service.create_community",
            name=community_name.root,
            created_by=created_by,
        ):
            if await self.community_repository.find_by_name(community_name.root):
                logfire.warn("Duplicate community name", name=community_name.root)
                raise ConflictError("Community name already exists")

            try:
                community = await self.community_repository.create(
                    community_name.root, created_by
                )
            except IntegrityError:
                logfire.warn("Duplicate community name", name=community_name.root)
                raise ConflictError("Community name already exists")

            await self.community_repository.add_member(community.id, created_by)
            logfire.info(
                "Community created", community_id=community.id, created_by=created_by
            )
            return community

    async def get_community_by_id(self, community_id: CommunityId) -> Community:
        """Get a community by ID.

        Raises:
            NotFoundError: If the community doesn't exist
        """
        community = await self.community_repository.find_by_id(community_id)
        if not community:
            raise NotFoundError("Community", community_id)
        return community

    async def get_community_view(
        self, community_id: CommunityId, viewer_id: Optional[UserId] = None
    ) -> CommunityView:
        """Get a community with counts and the viewer's membership flag.

        Raises:
            NotFoundError: If the community doesn't exist
        """
        view = await self.community_repository.get_view(community_id, viewer_id)
        if not view:
            raise NotFoundError("Community", community_id)
        return view

    async def list_communities(
        self, search: Optional[str] = None, limit: int = 20, offset: int = 0
    ) -> tuple[list[CommunityView], int]:
        """List communities by name with the total matching count."""
        return await self.community_repository.list_views(
            search=search, limit=limit, offset=offset
        )

    async def list_user_communities(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[CommunityView]:
        """List the communities a user has joined."""
        return await self.community_repository.list_for_member(
            user_id, limit=limit, offset=offset
        )

    async def update_community(
        self, community_id: CommunityId, user_id: UserId, name: str
    ) -> Community:
        """Rename a community (creator only).

        Raises:
            NotFoundError: If the community doesn't exist
            NotAuthorizedError: If the user is not the creator
            ValidationError: If the name is malformed
            ConflictError: If another community already uses the name
        """
        community_name = _parse_name(name)
        with logfire.span(
            "community_service.update_community",
            community_id=community_id,
            user_id=user_id,
        ):
            community = await self.get_community_by_id(community_id)
            ensure_owner("community", community_id, community.created_by, user_id)

            existing = await self.community_repository.find_by_name(
                community_name.root
            )
            if existing and existing.id != community_id:
                raise ConflictError("Community name already exists")

            try:
                updated = await self.community_repository.update_name(
                    community_id, community_name.root
                )
            except IntegrityError:
                logfire.warn("Duplicate community name", name=community_name.root)
                raise ConflictError("Community name already exists")
            if not updated:
                raise NotFoundError("Community", community_id)
            logfire.info("Community updated", community_id=community_id)
            return updated

    async def delete_community(
        self, community_id: CommunityId, user_id: UserId
    ) -> None:
        """Delete a community and everything in it (creator only).

        Raises:
            NotFoundError: If the community doesn't exist
            NotAuthorizedError: If the user is not the creator
        """
        with logfire.span(
            "community_service.delete_community",
            community_id=community_id,
            user_id=user_id,
        ):
            community = await self.get_community_by_id(community_id)
            ensure_owner("community", community_id, community.created_by, user_id)

            await self.community_repository.delete(community_id)
            logfire.info("Community deleted", community_id=community_id)

    async def join_community(self, community_id: CommunityId, user_id: UserId) -> None:
        """Add the user to a community.

        Raises:
            NotFoundError: If the community doesn't exist
            BusinessRuleViolationError: If the user is already a member
        """
        with logfire.span(
            "community_service.join_community",
            community_id=community_id,
            user_id=user_id,
        ):
            await self.get_community_by_id(community_id)

            if not await self.community_repository.add_member(community_id, user_id):
                raise BusinessRuleViolationError("Already a member of this community")
            logfire.info("Joined community", community_id=community_id, user_id=user_id)

    async def leave_community(self, community_id: CommunityId, user_id: UserId) -> None:
        """Remove the user from a community.

        Raises:
            NotFoundError: If the community doesn't exist
            BusinessRuleViolationError: If the user is the creator or not a member
        """
        with logfire.span(
            "community_service.leave_community",
            community_id=community_id,
            user_id=user_id,
        ):
            community = await self.get_community_by_id(community_id)
            if community.created_by == user_id:
                raise BusinessRuleViolationError(
                    "Community creators cannot leave their own communities"
                )

            if not await self.community_repository.remove_member(community_id, user_id):
                raise BusinessRuleViolationError("Not a member of this community")
            logfire.info("Left community", community_id=community_id, user_id=user_id)

    async def list_members(
        self, community_id: CommunityId, limit: int = 20, offset: int = 0
    ) -> tuple[list[Member], int]:
        """List a community's members, oldest membership first.

        Raises:
            NotFoundError: If the community doesn't exist
        """
        await self.get_community_by_id(community_id)
        return await self.community_repository.list_members(
            community_id, limit=limit, offset=offset
        )
