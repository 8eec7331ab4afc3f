"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.post import Post, PostView
from agora.domain.value import CommunityId, PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_view(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> Optional[PostView]:
        """Get a post joined with author, community and aggregates.

        Args:
            post_id: Post ID
            viewer_id: Optional viewer, used to compute liked_by_viewer

        Returns:
            Post view if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_views(
        self,
        viewer_id: Optional[UserId] = None,
        community_id: Optional[CommunityId] = None,
        author_id: Optional[UserId] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[PostView], int]:
        """List posts, newest first.

        Args:
            viewer_id: Optional viewer, used to compute liked_by_viewer
            community_id: Restrict to one community
            author_id: Restrict to one author
            search: Case-insensitive substring filter over title and body
            limit: Page size
            offset: Number of posts to skip

        Returns:
            Tuple of (page of post views, total matching count)
        """
        pass

    @abstractmethod
    async def create(
        self,
        title: str,
        body: Optional[str],
        image: Optional[str],
        community_id: CommunityId,
        user_id: UserId,
    ) -> Post:
        """Insert a new post.

        Returns:
            The created post with its database ID
        """
        pass

    @abstractmethod
    async def update(
        self,
        post_id: PostId,
        title: Optional[str] = None,
        body: Optional[str] = None,
        image: Optional[str] = None,
    ) -> Optional[Post]:
        """Partially update a post; None fields are left unchanged.

        Returns:
            Updated post, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (comments and likes are removed by cascade).

        Returns:
            True if a post was deleted
        """
        pass
