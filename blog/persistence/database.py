"""In-memory database: the set of stores shared by the application.

Storage is process-local; restarting the application discards all data.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

import logfire

from blog.config import Settings
from blog.domain.model import Comment, Identity, Post, Reaction
from blog.domain.value import (
    CommentId,
    PostId,
    ReactionId,
    ReactionType,
    UserId,
    Username,
)
from blog.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryIdentityProvider,
    InMemoryPostRegistry,
    InMemoryReactionRepository,
)
from blog.util.password import hash_password

DEMO_AVATAR_URL = (
    "https://images.pexels.com/photos/220453/pexels-photo-220453.jpeg"
    "?auto=compress&cs=tinysrgb&w=150"
)
WELCOME_IMAGE_URL = (
    "https://images.pexels.com/photos/261662/pexels-photo-261662.jpeg"
    "?auto=compress&cs=tinysrgb&w=800"
)
WEB_APPS_IMAGE_URL = (
    "https://images.pexels.com/photos/11035380/pexels-photo-11035380.jpeg"
    "?auto=compress&cs=tinysrgb&w=800"
)


@dataclass
class InMemoryDatabase:
    """Bundle of the in-memory stores backing one application instance."""

    comments: InMemoryCommentRepository = field(
        default_factory=InMemoryCommentRepository
    )
    posts: InMemoryPostRegistry = field(default_factory=InMemoryPostRegistry)
    identities: InMemoryIdentityProvider = field(
        default_factory=InMemoryIdentityProvider
    )
    reactions: InMemoryReactionRepository = field(
        default_factory=InMemoryReactionRepository
    )


async def seed_demo_data(database: InMemoryDatabase, settings: Settings) -> None:
    """Populate the stores with a demo user, two posts and a first comment.

    IDs are fixed: user 1, posts 1 and 2, comment 1 on post 1, and a
    ``like`` reaction from the demo user on post 1. The demo user logs in
    with the configured demo email and password.
    """
    now = datetime.now()
    demo = await database.identities.save(
        Identity(
            id=UserId(1),
            username=Username("demo"),
            email=settings.store.demo_email,
            avatar_url=DEMO_AVATAR_URL,
            bio="Demo account for trying out the blog.",
            password_hash=hash_password(
                settings.store.demo_password, settings.auth.password_hash_rounds
            ),
            created_at=now - timedelta(days=3),
        )
    )
    await database.posts.save(
        Post(
            id=PostId(1),
            title="Welcome to Enhanced Blog Platform",
            content=(
                "This is a sample blog post demonstrating the features of our "
                "enhanced blog platform. You can create, edit, and delete posts, "
                "as well as comment and react to them!"
            ),
            excerpt="A sample blog post demonstrating platform features...",
            author_id=demo.id,
            author=demo.snapshot(),
            tags=["welcome", "demo", "features"],
            featured_image=WELCOME_IMAGE_URL,
            created_at=now - timedelta(days=1),
            updated_at=now - timedelta(days=1),
        )
    )
    await database.posts.save(
        Post(
            id=PostId(2),
            title="Building Modern Web Applications",
            content=(
                "In today's fast-paced digital world, building modern web "
                "applications requires a solid understanding of various "
                "technologies and frameworks. From React to Node.js, developers "
                "have numerous tools at their disposal to create engaging and "
                "performant applications."
            ),
            excerpt=(
                "Learn about building modern web applications with the latest "
                "technologies..."
            ),
            author_id=demo.id,
            author=demo.snapshot(),
            tags=["web development", "react", "nodejs"],
            featured_image=WEB_APPS_IMAGE_URL,
            created_at=now - timedelta(days=2),
            updated_at=now - timedelta(days=2),
        )
    )
    created = now - timedelta(hours=12)
    await database.comments.save(
        Comment(
            id=CommentId(1),
            post_id=PostId(1),
            author_id=demo.id,
            author=demo.snapshot(),
            content=(
                "Great introduction to the platform! "
                "Looking forward to more features."
            ),
            parent_id=None,
            created_at=created,
            updated_at=created,
        )
    )
    await database.reactions.save(
        Reaction(
            id=ReactionId(1),
            post_id=PostId(1),
            user_id=demo.id,
            type=ReactionType.LIKE,
            created_at=now - timedelta(hours=6),
        )
    )


async def create_database(settings: Settings) -> InMemoryDatabase:
    """Create the application's stores, seeding them when configured.

    Args:
        settings: Application settings

    Returns:
        Fresh in-memory database
    """
    database = InMemoryDatabase()
    if settings.store.seed_demo_data:
        await seed_demo_data(database, settings)
        logfire.info("Demo data seeded")
    return database
