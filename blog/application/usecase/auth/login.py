"""Login use case."""

from pydantic import BaseModel

from blog.domain.service import AuthService, JWTService

from .common import AccountItem, AuthResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase:
    """Use case for email and password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Auth domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If the credentials do not match a user
        """
        identity = await self.auth_service.login(request.email, request.password)
        token = self.jwt_service.create_token(identity.id, identity.username.root)
        return AuthResponse(
            message="Login successful",
            token=token,
            user=AccountItem.from_domain(identity),
        )
