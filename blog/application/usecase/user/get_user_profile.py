"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import Identity
from blog.domain.service import UserService
from blog.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: int


class UserProfileItem(BaseModel):
    """Public profile of a user. Never carries login data."""

    user_id: int
    username: str
    avatar_url: str | None
    bio: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, identity: Identity) -> "UserProfileItem":
        return cls(
            user_id=identity.id,
            username=identity.username.root,
            avatar_url=identity.avatar_url,
            bio=identity.bio,
            created_at=identity.created_at,
        )


class GetUserProfileUseCase:
    """Use case for getting a user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfileItem:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        identity = await self.user_service.get_profile(UserId(request.user_id))
        return UserProfileItem.from_domain(identity)
