"""Test configuration and fixtures."""

import logfire
from dishka import AsyncContainer

from agora.domain.model import Comment, Community, Post, User
from agora.domain.repository import (
    CommentRepository,
    CommunityRepository,
    PostRepository,
    UserRepository,
)
from agora.domain.value import CommentId, Role

# Console-only Logfire, nothing sent anywhere
logfire.configure(send_to_logfire=False, console=False)


async def seed_user(env: AsyncContainer, username: str = "alice") -> User:
    """Insert a user directly through the repository.

    The password hash is a placeholder; use UserService.register for users
    that need to log in.
    """
    user_repo = await env.get(UserRepository)
    return await user_repo.create(
        username=username,
        email=f"{username}@example.com",
        password_hash="unused",
        role=Role.USER,
    )


async def seed_community(
    env: AsyncContainer, creator: User, name: str = "Science"
) -> Community:
    community_repo = await env.get(CommunityRepository)
    community = await community_repo.create(name, creator.id)
    await community_repo.add_member(community.id, creator.id)
    return community


async def seed_post(
    env: AsyncContainer,
    author: User,
    community: Community,
    title: str = "Test Post",
) -> Post:
    post_repo = await env.get(PostRepository)
    return await post_repo.create(
        title=title,
        body="Test content",
        image=None,
        community_id=community.id,
        user_id=author.id,
    )


async def seed_comment(
    env: AsyncContainer,
    author: User,
    post: Post,
    body: str = "Test comment",
    parent_comment_id: CommentId | None = None,
) -> Comment:
    comment_repo = await env.get(CommentRepository)
    return await comment_repo.create(
        post_id=post.id,
        user_id=author.id,
        body=body,
        parent_comment_id=parent_comment_id,
    )
