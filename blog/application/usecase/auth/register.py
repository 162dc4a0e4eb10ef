"""Register use case."""

from pydantic import BaseModel

from blog.domain.service import AuthService, JWTService

from .common import AccountItem, AuthResponse


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str
    password: str


class RegisterUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Auth domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute register flow.

        Steps:
        1. Validate and store the new identity
        2. Issue a JWT for it

        Raises:
            ValidationError: If a field is invalid or already registered
        """
        identity = await self.auth_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
        )
        token = self.jwt_service.create_token(identity.id, identity.username.root)
        return AuthResponse(
            message="User registered successfully",
            token=token,
            user=AccountItem.from_domain(identity),
        )
