"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status
from pydantic import BaseModel

from blog.application.usecase.auth import (
    AccountItem,
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from blog.config import Settings
from blog.domain.error import DomainError, NotFoundError
from blog.interface.api.security import extract_token
from blog.interface.error import to_http_exception
from blog.util.jwt import JWTError

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registering."""

    username: str
    email: str
    password: str


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: str
    password: str


class AuthStatusResponse(BaseModel):
    """Authentication status response."""

    authenticated: bool
    user: AccountItem | None = None


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    # Cross-site in production needs samesite=none, which requires secure
    is_production = settings.environment == "production"
    response.set_cookie(
        key="auth_token",
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Create an account and sign it in.

    The token is returned in the body and set as an HTTP-only cookie.

    Raises:
        HTTPException: If a field is invalid or already registered
    """
    try:
        result = await register_use_case.execute(
            RegisterRequest(
                username=request.username,
                email=request.email,
                password=request.password,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)

    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Log in with email and password.

    Raises:
        HTTPException: 401 if the credentials do not match
    """
    try:
        result = await login_use_case.execute(
            LoginRequest(email=request.email, password=request.password)
        )
    except DomainError as e:
        raise to_http_exception(e)

    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    response.delete_cookie(key="auth_token", path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without authentication: it answers authenticated=false
    instead of raising.
    """
    token = extract_token(auth_token, authorization)
    if not token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
        return AuthStatusResponse(authenticated=True, user=user)

    except JWTError:
        # Invalid or expired token - this is expected behavior, not an error
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # JWT valid but user no longer exists (orphaned token)
        return AuthStatusResponse(authenticated=False)
