"""In-memory identity provider."""

from typing import Optional

from blog.domain.error import NotFoundError
from blog.domain.model.identity import Identity
from blog.domain.repository.identity import IdentityProvider
from blog.domain.value import UserId


class InMemoryIdentityProvider(IdentityProvider):
    """In-memory implementation of IdentityProvider."""

    def __init__(self) -> None:
        self._identities: dict[UserId, Identity] = {}
        self._last_id = 0

    async def resolve(self, user_id: UserId) -> Identity:
        """Resolve a user ID to its identity."""
        identity = self._identities.get(user_id)
        if identity is None:
            raise NotFoundError("User", str(user_id))
        return identity

    async def next_id(self) -> UserId:
        """Allocate the next user ID."""
        self._last_id += 1
        return UserId(self._last_id)

    async def find_by_username(self, username: str) -> Optional[Identity]:
        """Find an identity by exact username."""
        for identity in self._identities.values():
            if identity.username.root == username:
                return identity
        return None

    async def find_by_email(self, email: str) -> Optional[Identity]:
        """Find an identity by email, ignoring case."""
        wanted = email.lower()
        for identity in self._identities.values():
            if identity.email and identity.email.lower() == wanted:
                return identity
        return None

    async def save(self, identity: Identity) -> Identity:
        """Register or replace an identity."""
        self._identities[identity.id] = identity
        self._last_id = max(self._last_id, identity.id)
        return identity
