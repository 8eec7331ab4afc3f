"""Comment domain service."""

from typing import Optional

import logfire

from agora.domain.error import NotFoundError, ValidationError
from agora.domain.model.comment import Comment, CommentView
from agora.domain.repository import CommentRepository, PostRepository
from agora.domain.value import CommentId, PostId, UserId

from .authorization import ensure_owner
from .base import Service
from .comment_tree import CommentNode, build_comment_tree


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def create_comment(
        self,
        post_id: PostId,
        user_id: UserId,
        body: str,
        parent_comment_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            user_id: Author user ID
            body: Comment text
            parent_comment_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post or the parent comment doesn't exist
            ValidationError: If the parent belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            user_id=user_id,
            parent_comment_id=parent_comment_id,
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Comment on non-existent post", post_id=post_id)
                raise NotFoundError("Post", post_id)

            if parent_comment_id is not None:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_comment_id=parent_comment_id,
                        post_id=post_id,
                    )
                    raise NotFoundError("Parent comment", parent_comment_id)
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_comment_id=parent_comment_id,
                        parent_post_id=parent.post_id,
                        target_post_id=post_id,
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this post"
                    )

            comment = await self.comment_repository.create(
                post_id=post_id,
                user_id=user_id,
                body=body,
                parent_comment_id=parent_comment_id,
            )
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                post_id=post_id,
                user_id=user_id,
                is_reply=parent_comment_id is not None,
            )
            return comment

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", comment_id)
        return comment

    async def get_comment_view(
        self, comment_id: CommentId, viewer_id: Optional[UserId] = None
    ) -> CommentView:
        """Get a comment annotated with author info and like aggregate.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        view = await self.comment_repository.get_view(comment_id, viewer_id)
        if not view:
            raise NotFoundError("Comment", comment_id)
        return view

    async def get_comment_tree(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> tuple[list[CommentNode], int]:
        """Get a post's comments as a nested forest.

        Args:
            post_id: Post ID
            viewer_id: Optional viewer for liked_by_viewer

        Returns:
            Tuple of (root nodes, number of comment rows fetched)

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "comment_service.get_comment_tree", post_id=post_id, viewer_id=viewer_id
        ):
            if not await self.post_repository.find_by_id(post_id):
                raise NotFoundError("Post", post_id)

            rows = await self.comment_repository.find_views_by_post(post_id, viewer_id)
            roots = build_comment_tree(rows)
            logfire.info(
                "Comment tree built",
                post_id=post_id,
                rows=len(rows),
                roots=len(roots),
            )
            return roots, len(rows)

    async def update_comment(
        self, comment_id: CommentId, user_id: UserId, body: str
    ) -> Comment:
        """Edit a comment's body (author only).

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.update_comment", comment_id=comment_id, user_id=user_id
        ):
            comment = await self.get_comment_by_id(comment_id)
            ensure_owner("comment", comment_id, comment.user_id, user_id)

            updated = await self.comment_repository.update_body(comment_id, body)
            if not updated:
                raise NotFoundError("Comment", comment_id)
            logfire.info("Comment updated", comment_id=comment_id)
            return updated

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete a comment with its replies and likes (author only).

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=comment_id, user_id=user_id
        ):
            comment = await self.get_comment_by_id(comment_id)
            ensure_owner("comment", comment_id, comment.user_id, user_id)

            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)

    async def list_comments_by_author(
        self,
        author_id: UserId,
        viewer_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[CommentView]:
        """List a user's comments, newest first."""
        return await self.comment_repository.find_views_by_author(
            author_id, viewer_id, limit=limit, offset=offset
        )
