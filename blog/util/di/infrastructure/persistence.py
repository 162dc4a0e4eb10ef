"""Persistence infrastructure providers."""

from dishka import Scope, provide

from blog.config import Settings
from blog.domain.repository import (
    CommentRepository,
    IdentityProvider,
    PostRegistry,
    ReactionRepository,
)
from blog.persistence.database import InMemoryDatabase, create_database
from blog.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    One in-memory database lives for the lifetime of the application, so
    every request sees the same comments, posts and reactions.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_database(self, settings: Settings) -> InMemoryDatabase:
        """Provide the shared in-memory database (seeded if configured)."""
        return await create_database(settings)

    @provide(scope=Scope.APP)
    def get_comment_repository(self, database: InMemoryDatabase) -> CommentRepository:
        """Provide Comment repository."""
        return database.comments

    @provide(scope=Scope.APP)
    def get_post_registry(self, database: InMemoryDatabase) -> PostRegistry:
        """Provide Post registry."""
        return database.posts

    @provide(scope=Scope.APP)
    def get_identity_provider(self, database: InMemoryDatabase) -> IdentityProvider:
        """Provide Identity provider."""
        return database.identities

    @provide(scope=Scope.APP)
    def get_reaction_repository(
        self, database: InMemoryDatabase
    ) -> ReactionRepository:
        """Provide Reaction repository."""
        return database.reactions
