"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.comment import Comment, CommentView
from agora.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_views_by_post(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> List[CommentView]:
        """Fetch every comment of a post as a flat list.

        Rows are ordered by ascending creation time (ID as tiebreaker),
        each annotated with author info, like count and the viewer's
        like flag.

        Args:
            post_id: The post ID
            viewer_id: Optional viewer for liked_by_viewer

        Returns:
            Flat list of comment views
        """
        pass

    @abstractmethod
    async def get_view(
        self, comment_id: CommentId, viewer_id: Optional[UserId] = None
    ) -> Optional[CommentView]:
        """Fetch a single comment with author info and like aggregate."""
        pass

    @abstractmethod
    async def find_views_by_author(
        self,
        author_id: UserId,
        viewer_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[CommentView]:
        """Find comments by a specific author, newest first.

        Views include the title of the post each comment belongs to.
        """
        pass

    @abstractmethod
    async def create(
        self,
        post_id: PostId,
        user_id: UserId,
        body: str,
        parent_comment_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment.

        Returns:
            The created comment with its database ID
        """
        pass

    @abstractmethod
    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace a comment's body.

        Returns:
            Updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete).

        Replies and likes are removed by cascade.

        Returns:
            True if a comment was deleted
        """
        pass
