"""Get current user use case."""

from pydantic import BaseModel

from blog.domain.service import JWTService, UserService

from .common import AccountItem


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> AccountItem:
        """Execute get current user flow.

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        # Verify token (raises JWTError if invalid)
        payload = self.jwt_service.verify_token(request.token)

        identity = await self.user_service.get_profile(payload.user_id)
        return AccountItem.from_domain(identity)
