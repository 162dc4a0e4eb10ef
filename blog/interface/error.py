"""Interface layer error mapping.

Translates domain errors into HTTP responses for the API routes.
"""

import logfire
from fastapi import HTTPException, status

from blog.domain.error import (
    AuthenticationError,
    CorruptedDataError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (UnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (CorruptedDataError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Build the HTTPException matching a domain error.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException with status code and client-facing detail
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            break
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if status_code >= 500:
        logfire.error(
            "Request failed", error=str(error), error_type=type(error).__name__
        )
    else:
        logfire.warn(
            "Request rejected", error=str(error), error_type=type(error).__name__
        )

    return HTTPException(status_code=status_code, detail=str(error))
