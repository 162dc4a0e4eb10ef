"""User domain service."""

from typing import Optional

import logfire

from blog.domain.error import ValidationError
from blog.domain.model import Identity
from blog.domain.repository import IdentityProvider
from blog.domain.value import BIO_MAX_LENGTH, USERNAME_MIN_LENGTH, UserId, Username

from .base import Service


def normalize_username(username: str) -> Username:
    """Trim a username and check its length.

    Raises:
        ValidationError: If the username is too short or too long
    """
    trimmed = username.strip()
    if len(trimmed) < USERNAME_MIN_LENGTH:
        raise ValidationError(
            f"Username must be at least {USERNAME_MIN_LENGTH} characters"
        )
    try:
        return Username(trimmed)
    except ValueError as e:
        raise ValidationError(str(e)) from e


class UserService(Service):
    """Domain service for user profiles."""

    def __init__(self, identity_provider: IdentityProvider) -> None:
        """Initialize user service.

        Args:
            identity_provider: Identity provider holding user records
        """
        self.identity_provider = identity_provider

    async def get_profile(self, user_id: UserId) -> Identity:
        """Get a user's profile.

        Raises:
            NotFoundError: If the user does not exist
        """
        return await self.identity_provider.resolve(user_id)

    async def update_profile(
        self,
        user_id: UserId,
        username: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> Identity:
        """Update a user's profile. Fields left as None keep their value.

        Content the user already wrote keeps the author snapshot taken
        when it was created.

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If the username is invalid or already taken,
                or the bio is too long
        """
        with logfire.span("user_service.update_profile", user_id=user_id):
            identity = await self.identity_provider.resolve(user_id)
            changes: dict = {}

            if username is not None:
                new_username = normalize_username(username)
                if new_username != identity.username:
                    holder = await self.identity_provider.find_by_username(
                        new_username.root
                    )
                    if holder is not None and holder.id != user_id:
                        logfire.warn(
                            "Username already taken",
                            user_id=user_id,
                            username=new_username.root,
                        )
                        raise ValidationError("Username is already taken")
                    changes["username"] = new_username

            if bio is not None:
                trimmed_bio = bio.strip()
                if len(trimmed_bio) > BIO_MAX_LENGTH:
                    raise ValidationError(
                        f"Bio must be less than {BIO_MAX_LENGTH} characters"
                    )
                changes["bio"] = trimmed_bio

            if avatar_url is not None:
                changes["avatar_url"] = avatar_url

            updated = await self.identity_provider.save(
                identity.model_copy(update=changes)
            )
            logfire.info(
                "Profile updated", user_id=user_id, fields=sorted(changes.keys())
            )
            return updated
