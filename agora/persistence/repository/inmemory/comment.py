"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from agora.domain.model.comment import Comment, CommentView
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import CommentId, LikeTarget, PostId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _to_view(
        self,
        comment: Comment,
        viewer_id: Optional[UserId] = None,
        with_post_title: bool = False,
    ) -> CommentView:
        author = self._store.users.get(comment.user_id)
        post = self._store.posts.get(comment.post_id)
        return CommentView(
            **comment.model_dump(),
            username=author.username if author else None,
            profile_image=author.profile_image if author else None,
            post_title=post.title if with_post_title and post else None,
            like_count=self._store.like_count(LikeTarget.COMMENT, comment.id),
            liked_by_viewer=(comment.id, viewer_id)
            in self._store.likes[LikeTarget.COMMENT],
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_views_by_post(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> list[CommentView]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return [self._to_view(c, viewer_id) for c in comments]

    async def get_view(
        self, comment_id: CommentId, viewer_id: Optional[UserId] = None
    ) -> Optional[CommentView]:
        """Get a single comment with aggregates."""
        comment = self._store.comments.get(comment_id)
        return self._to_view(comment, viewer_id) if comment else None

    async def find_views_by_author(
        self,
        author_id: UserId,
        viewer_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[CommentView]:
        """Find comments by a specific author, newest first."""
        comments = [c for c in self._store.comments.values() if c.user_id == author_id]

        # Sort by created_at descending
        comments.sort(key=lambda c: (c.created_at, c.id), reverse=True)

        # Paginate
        return [
            self._to_view(c, viewer_id, with_post_title=True)
            for c in comments[offset : offset + limit]
        ]

    async def create(
        self,
        post_id: PostId,
        user_id: UserId,
        body: str,
        parent_comment_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a comment."""
        now = datetime.now()
        comment = Comment(
            id=CommentId(self._store.next_id("comments")),
            body=body,
            post_id=post_id,
            user_id=user_id,
            parent_comment_id=parent_comment_id,
            created_at=now,
            updated_at=now,
        )
        self._store.comments[comment.id] = comment
        return comment

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace the body of a comment."""
        comment = self._store.comments.get(comment_id)
        if not comment:
            return None

        updated = comment.model_copy(
            update={"body": body, "updated_at": datetime.now()}
        )
        self._store.comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment with its replies and likes."""
        return self._store.delete_comment(comment_id)
