"""Identity provider interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.identity import Identity
from blog.domain.value import UserId


class IdentityProvider(ABC):
    """Source of user identities and their display attributes."""

    @abstractmethod
    async def resolve(self, user_id: UserId) -> Identity:
        """Resolve a user ID to its identity.

        Args:
            user_id: The user's ID

        Returns:
            The identity record

        Raises:
            NotFoundError: If no identity exists for the ID
        """
        pass

    @abstractmethod
    async def next_id(self) -> UserId:
        """Allocate a fresh user ID."""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[Identity]:
        """Find an identity by exact username."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Identity]:
        """Find an identity by email (case-insensitive)."""
        pass

    @abstractmethod
    async def save(self, identity: Identity) -> Identity:
        """Register or replace an identity."""
        pass
