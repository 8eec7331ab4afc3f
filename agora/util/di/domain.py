"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import AuthSettings, ModerationSettings
from agora.domain.repository import (
    CommentRepository,
    CommunityRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from agora.domain.service import (
    CommentService,
    CommunityService,
    JWTService,
    LikeService,
    ModerationService,
    PostService,
    ToxicityClient,
    UserService,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_community_service(
        self, community_repository: CommunityRepository
    ) -> CommunityService:
        """Provide community domain service."""
        return CommunityService(community_repository=community_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        community_repository: CommunityRepository,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            community_repository=community_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
        )

    @provide
    def get_like_service(self, like_repository: LikeRepository) -> LikeService:
        """Provide like domain service."""
        return LikeService(like_repository=like_repository)

    @provide
    def get_moderation_service(
        self, toxicity_client: ToxicityClient, settings: ModerationSettings
    ) -> ModerationService:
        """Provide moderation gate."""
        return ModerationService(client=toxicity_client, settings=settings)
