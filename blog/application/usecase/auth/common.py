"""Response models shared by auth use cases."""

from pydantic import BaseModel

from blog.domain.model import Identity


class AccountItem(BaseModel):
    """The signed-in user's own account details."""

    user_id: int
    username: str
    email: str | None
    avatar_url: str | None
    bio: str | None

    @classmethod
    def from_domain(cls, identity: Identity) -> "AccountItem":
        return cls(
            user_id=identity.id,
            username=identity.username.root,
            email=identity.email,
            avatar_url=identity.avatar_url,
            bio=identity.bio,
        )


class AuthResponse(BaseModel):
    """Issued token plus the account it was issued for."""

    message: str
    token: str
    user: AccountItem
