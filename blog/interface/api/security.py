"""Request authentication helpers for API routes."""

from fastapi import HTTPException, status

from blog.domain.service import JWTService
from blog.domain.value import UserId

BEARER_PREFIX = "Bearer "


def extract_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the JWT from the Authorization header, falling back to the cookie."""
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX) :].strip() or None
    return auth_token


def require_user_id(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
    action: str,
) -> UserId:
    """Resolve the authenticated user or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        authorization: Authorization header value
        action: Human-readable action for the error message

    Returns:
        Authenticated user ID

    Raises:
        HTTPException: If no valid token was supplied
    """
    user_id = jwt_service.get_user_id_from_token(
        extract_token(auth_token, authorization)
    )
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id
