"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from agora.domain.model.post import Post, PostView
from agora.domain.repository.post import PostRepository
from agora.domain.value import CommunityId, LikeTarget, PostId, UserId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _to_view(self, post: Post, viewer_id: Optional[UserId] = None) -> PostView:
        author = self._store.users.get(post.user_id)
        community = self._store.communities.get(post.community_id)
        return PostView(
            **post.model_dump(),
            username=author.username if author else None,
            community_name=community.name if community else None,
            like_count=self._store.like_count(LikeTarget.POST, post.id),
            comment_count=sum(
                1 for c in self._store.comments.values() if c.post_id == post.id
            ),
            liked_by_viewer=(post.id, viewer_id) in self._store.likes[LikeTarget.POST],
        )

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def get_view(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> Optional[PostView]:
        """Get a post with aggregates."""
        post = self._store.posts.get(post_id)
        return self._to_view(post, viewer_id) if post else None

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
        posts = list(self._store.posts.values())
        if community_id is not None:
            posts = [p for p in posts if p.community_id == community_id]
        if author_id is not None:
            posts = [p for p in posts if p.user_id == author_id]
        if search:
            needle = search.lower()
            posts = [
                p
                for p in posts
                if needle in p.title.lower() or needle in (p.body or "").lower()
            ]

        # Sort by created_at descending
        posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)

        page = posts[offset : offset + limit]
        return [self._to_view(p, viewer_id) for p in page], len(posts)

    async def create(
        self,
        title: str,
        body: Optional[str],
        image: Optional[str],
        community_id: CommunityId,
        user_id: UserId,
    ) -> Post:
        """Insert a post."""
        now = datetime.now()
        post = Post(
            id=PostId(self._store.next_id("posts")),
            title=title,
            body=body,
            image=image,
            community_id=community_id,
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )
        self._store.posts[post.id] = post
        return post

    async def update(
        self,
        post_id: PostId,
        title: Optional[str] = None,
        body: Optional[str] = None,
        image: Optional[str] = None,
    ) -> Optional[Post]:
        """Partially update a post."""
        post = self._store.posts.get(post_id)
        if not post:
            return None

        changes = {
            key: value
            for key, value in (("title", title), ("body", body), ("image", image))
            if value is not None
        }
        updated = post.model_copy(update={**changes, "updated_at": datetime.now()})
        self._store.posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post with its comments and likes."""
        return self._store.delete_post(post_id)
