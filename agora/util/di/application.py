"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.auth import (
    CheckUserUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
    UpdateCurrentUserUseCase,
)
from agora.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    ListUserCommentsUseCase,
    UpdateCommentUseCase,
)
from agora.application.usecase.community import (
    CreateCommunityUseCase,
    DeleteCommunityUseCase,
    GetCommunityUseCase,
    JoinCommunityUseCase,
    LeaveCommunityUseCase,
    ListCommunitiesUseCase,
    ListMembersUseCase,
    ListUserCommunitiesUseCase,
    UpdateCommunityUseCase,
)
from agora.application.usecase.like import ToggleLikeUseCase
from agora.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from agora.domain.service import (
    CommentService,
    CommunityService,
    JWTService,
    LikeService,
    ModerationService,
    PostService,
    UserService,
)
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_current_user_use_case(
        self, user_service: UserService
    ) -> UpdateCurrentUserUseCase:
        """Provide update current user use case."""
        return UpdateCurrentUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_check_user_use_case(self, user_service: UserService) -> CheckUserUseCase:
        """Provide check user use case."""
        return CheckUserUseCase(user_service=user_service)

    # Community use cases
    @provide(scope=Scope.REQUEST)
    def get_create_community_use_case(
        self, community_service: CommunityService
    ) -> CreateCommunityUseCase:
        """Provide create community use case."""
        return CreateCommunityUseCase(community_service=community_service)

    @provide(scope=Scope.REQUEST)
    def get_get_community_use_case(
        self, community_service: CommunityService
    ) -> GetCommunityUseCase:
        """Provide get community use case."""
        return GetCommunityUseCase(community_service=community_service)

    @provide(scope=Scope.REQUEST)
    def get_list_communities_use_case(
        self, community_service: CommunityService
    ) -> ListCommunitiesUseCase:
        """Provide list communities use case."""
        return ListCommunitiesUseCase(community_service=community_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_communities_use_case(
        self, community_service: CommunityService
    ) -> ListUserCommunitiesUseCase:
        """Provide list user communities use case."""
        return ListUserCommunitiesUseCase(community_service=community_service)

    @provide(scope=Scope.REQUEST)
    def get_update_community_use_case(
        self, community_service: CommunityService
    ) -> UpdateCommunityUseCase:
        """Provide update community use case."""
        return UpdateCommunityUseCase(community_service=community_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_community_use_case(
        self, community_service: CommunityService
    ) -> DeleteCommunityUseCase:
        """Provide delete community use case."""
        return DeleteCommunityUseCase(community_service=community_service)

    @provide(scope=Scope.REQUEST)
    def get_join_community_use_case(
        self, community_service: CommunityService
    ) -> JoinCommunityUseCase:
        """Provide join community use case."""
        return JoinCommunityUseCase(community_service=community_service)

    @provide(scope=Scope.REQUEST)
    def get_leave_community_use_case(
        self, community_service: CommunityService
    ) -> LeaveCommunityUseCase:
        """Provide leave community use case."""
        return LeaveCommunityUseCase(community_service=community_service)

    @provide(scope=Scope.REQUEST)
    def get_list_members_use_case(
        self, community_service: CommunityService
    ) -> ListMembersUseCase:
        """Provide list members use case."""
        return ListMembersUseCase(community_service=community_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            moderation_service=moderation_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            moderation_service=moderation_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_comments_use_case(
        self, comment_service: CommentService
    ) -> ListUserCommentsUseCase:
        """Provide list user comments use case."""
        return ListUserCommentsUseCase(comment_service=comment_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)
