"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, StoreSettings
from blog.domain.repository import (
    CommentRepository,
    IdentityProvider,
    PostRegistry,
    ReactionRepository,
)
from blog.domain.service import (
    AuthService,
    CommentService,
    JWTService,
    PostService,
    ReactionService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; the stores they wrap decide how
    long data lives.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self, identity_provider: IdentityProvider, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            identity_provider=identity_provider,
            password_hash_rounds=auth_settings.password_hash_rounds,
        )

    @provide
    def get_user_service(self, identity_provider: IdentityProvider) -> UserService:
        """Provide user profile domain service."""
        return UserService(identity_provider=identity_provider)

    @provide
    def get_post_service(
        self,
        post_registry: PostRegistry,
        identity_provider: IdentityProvider,
        comment_repository: CommentRepository,
        reaction_repository: ReactionRepository,
        store_settings: StoreSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_registry=post_registry,
            identity_provider=identity_provider,
            comment_repository=comment_repository,
            reaction_repository=reaction_repository,
            collaborator_timeout=store_settings.collaborator_timeout_seconds,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_registry: PostRegistry,
        identity_provider: IdentityProvider,
        store_settings: StoreSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_registry=post_registry,
            identity_provider=identity_provider,
            collaborator_timeout=store_settings.collaborator_timeout_seconds,
        )

    @provide
    def get_reaction_service(
        self,
        reaction_repository: ReactionRepository,
        post_registry: PostRegistry,
        store_settings: StoreSettings,
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            reaction_repository=reaction_repository,
            post_registry=post_registry,
            collaborator_timeout=store_settings.collaborator_timeout_seconds,
        )
