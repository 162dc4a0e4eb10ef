"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import BaseModel, Field, HttpUrl

from blog.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
    UserProfileItem,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.interface.api.security import require_user_id
from blog.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating user profile."""

    username: str | None = None
    bio: str | None = Field(None, max_length=500)
    avatar_url: HttpUrl | None = None


@router.put("/profile", response_model=UpdateUserProfileResponse)
async def update_my_profile(
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UpdateUserProfileResponse:
    """Update the current user's profile.

    Posts and comments written before the change keep the username and
    avatar they were created with.

    Raises:
        HTTPException: If not authenticated, the username is taken, or
            a field is invalid
    """
    user_id = require_user_id(
        jwt_service, auth_token, authorization, "update your profile"
    )

    try:
        return await update_user_profile_use_case.execute(
            UpdateUserProfileRequest(
                user_id=user_id,
                username=request.username,
                bio=request.bio,
                avatar_url=str(request.avatar_url) if request.avatar_url else None,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{user_id}", response_model=UserProfileItem)
async def get_user_profile(
    user_id: int,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> UserProfileItem:
    """Get a user's public profile.

    Raises:
        HTTPException: If user not found
    """
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
