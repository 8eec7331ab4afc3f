"""Post domain service."""

from typing import Optional

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model.post import Post, PostView
from agora.domain.repository import CommunityRepository, PostRepository
from agora.domain.value import CommunityId, PostId, UserId

from .authorization import ensure_owner
from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        community_repository: CommunityRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            community_repository: Community repository
        """
        self.post_repository = post_repository
        self.community_repository = community_repository

    async def create_post(
        self,
        title: str,
        body: Optional[str],
        image: Optional[str],
        community_id: CommunityId,
        user_id: UserId,
    ) -> Post:
        """Create a post in a community.

        Raises:
            NotFoundError: If the community doesn't exist
        """
        with logfire.span(
            "post_service.create_post", community_id=community_id, user_id=user_id
        ):
            if not await self.community_repository.find_by_id(community_id):
                logfire.warn(
                    "Post in non-existent community", community_id=community_id
                )
                raise NotFoundError("Community", community_id)

            post = await self.post_repository.create(
                title=title,
                body=body,
                image=image,
                community_id=community_id,
                user_id=user_id,
            )
            logfire.info("Post created", post_id=post.id, community_id=community_id)
            return post

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_repository.find_by_id(post_id)
        if not post:
            raise NotFoundError("Post", post_id)
        return post

    async def get_post_view(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> PostView:
        """Get a post with like/comment aggregates.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        view = await self.post_repository.get_view(post_id, viewer_id)
        if not view:
            raise NotFoundError("Post", post_id)
        return view

    async def list_posts(
        self,
        viewer_id: Optional[UserId] = None,
        community_id: Optional[CommunityId] = None,
        author_id: Optional[UserId] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[PostView], int]:
        """List posts, newest first, with the total matching count."""
        with logfire.span(
            "post_service.list_posts",
            community_id=community_id,
            author_id=author_id,
            search=search,
            limit=limit,
            offset=offset,
        ):
            return await self.post_repository.list_views(
                viewer_id=viewer_id,
                community_id=community_id,
                author_id=author_id,
                search=search,
                limit=limit,
                offset=offset,
            )

    async def update_post(
        self,
        post_id: PostId,
        user_id: UserId,
        title: Optional[str] = None,
        body: Optional[str] = None,
        image: Optional[str] = None,
    ) -> Post:
        """Partially update a post (author only).

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span("post_service.update_post", post_id=post_id, user_id=user_id):
            post = await self.get_post_by_id(post_id)
            ensure_owner("post", post_id, post.user_id, user_id)

            updated = await self.post_repository.update(
                post_id, title=title, body=body, image=image
            )
            if not updated:
                raise NotFoundError("Post", post_id)
            logfire.info("Post updated", post_id=post_id)
            return updated

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Delete a post with its comments and likes (author only).

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span("post_service.delete_post", post_id=post_id, user_id=user_id):
            post = await self.get_post_by_id(post_id)
            ensure_owner("post", post_id, post.user_id, user_id)

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=post_id)
