"""Update user profile use case."""

from pydantic import BaseModel

from blog.domain.service import UserService
from blog.domain.value import UserId

from .get_user_profile import UserProfileItem


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: int
    username: str | None = None
    bio: str | None = None
    avatar_url: str | None = None


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    message: str = "Profile updated successfully"
    user: UserProfileItem


class UpdateUserProfileUseCase:
    """Use case for updating the current user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Args:
            request: Update request with user ID and changed fields

        Returns:
            The updated profile

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If the username is taken or a field is invalid
        """
        identity = await self.user_service.update_profile(
            user_id=UserId(request.user_id),
            username=request.username,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )
        return UpdateUserProfileResponse(user=UserProfileItem.from_domain(identity))
