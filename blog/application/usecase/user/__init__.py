"""User use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileItem,
)
from .update_user_profile import (
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "UserProfileItem",
    "UpdateUserProfileRequest",
    "UpdateUserProfileResponse",
    "UpdateUserProfileUseCase",
]
