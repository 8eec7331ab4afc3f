"""Shared in-memory storage for the in-memory repositories.

Plays the role of the database: one store is shared by all repositories of
a test so that joins, aggregates and ON DELETE CASCADE behave as they do in
PostgreSQL.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime

from agora.domain.model import Comment, Community, Post, User
from agora.domain.value import CommentId, CommunityId, LikeTarget, PostId, UserId


@dataclass
class InMemoryStore:
    """Tables of the in-memory database."""

    users: dict[UserId, User] = field(default_factory=dict)
    communities: dict[CommunityId, Community] = field(default_factory=dict)
    memberships: dict[tuple[CommunityId, UserId], datetime] = field(
        default_factory=dict
    )
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    # target -> {(target_id, user_id)}
    likes: dict[LikeTarget, set[tuple[int, UserId]]] = field(
        default_factory=lambda: defaultdict(set)
    )
    _sequences: dict[str, int] = field(default_factory=lambda: defaultdict(int))

    def next_id(self, table: str) -> int:
        """Next value of a table's ID sequence, starting at 1."""
        self._sequences[table] += 1
        return self._sequences[table]

    def like_count(self, target: LikeTarget, target_id: int) -> int:
        return sum(1 for liked_id, _ in self.likes[target] if liked_id == target_id)

    def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a comment, its replies at any depth and their likes."""
        if comment_id not in self.comments:
            return False

        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            parent_id = frontier.pop()
            for comment in self.comments.values():
                if comment.parent_comment_id == parent_id and comment.id not in doomed:
                    doomed.add(comment.id)
                    frontier.append(comment.id)

        for doomed_id in doomed:
            del self.comments[doomed_id]
        self.likes[LikeTarget.COMMENT] = {
            pair for pair in self.likes[LikeTarget.COMMENT] if pair[0] not in doomed
        }
        return True

    def delete_post(self, post_id: PostId) -> bool:
        """Delete a post with its comments and all their likes."""
        if post_id not in self.posts:
            return False

        roots = [
            c.id
            for c in self.comments.values()
            if c.post_id == post_id and c.parent_comment_id is None
        ]
        for root_id in roots:
            self.delete_comment(root_id)
        # Anything left over belongs to the post too
        for comment in [c for c in self.comments.values() if c.post_id == post_id]:
            self.delete_comment(comment.id)

        self.likes[LikeTarget.POST] = {
            pair for pair in self.likes[LikeTarget.POST] if pair[0] != post_id
        }
        del self.posts[post_id]
        return True

    def delete_community(self, community_id: CommunityId) -> bool:
        """Delete a community with its posts and memberships."""
        if community_id not in self.communities:
            return False

        for post in [p for p in self.posts.values() if p.community_id == community_id]:
            self.delete_post(post.id)
        for key in [k for k in self.memberships if k[0] == community_id]:
            del self.memberships[key]
        del self.communities[community_id]
        return True
