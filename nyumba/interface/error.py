"""Interface layer errors.

Maps domain errors onto HTTP responses. The response body carries the
error's stable ``code`` so clients can branch without parsing messages.
"""

import logfire
from fastapi import HTTPException, status

from nyumba.domain.error import (
    AlreadyRespondedError,
    DomainError,
    DuplicateMentorshipError,
    DuplicateRequestError,
    NotAuthorizedError,
    NotFoundError,
    RateLimitedError,
    TransientStoreError,
    ValidationError,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    DuplicateRequestError: status.HTTP_409_CONFLICT,
    AlreadyRespondedError: status.HTTP_409_CONFLICT,
    DuplicateMentorshipError: status.HTTP_409_CONFLICT,
    RateLimitedError: status.HTTP_429_TOO_MANY_REQUESTS,
    TransientStoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_exception(error: DomainError) -> HTTPException:
    """Convert a domain error into an HTTPException.

    Args:
        error: The domain error raised by a use case

    Returns:
        HTTPException with the mapped status and ``{code, message}`` detail
    """
    status_code = next(
        (
            code
            for error_type, code in STATUS_BY_ERROR.items()
            if isinstance(error, error_type)
        ),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

    headers = None
    if isinstance(error, RateLimitedError):
        headers = {"Retry-After": str(error.retry_after_seconds)}

    if status_code >= 500:
        logfire.error("Request failed", code=error.code, error=str(error))

    return HTTPException(
        status_code=status_code,
        detail={"code": error.code, "message": str(error)},
        headers=headers,
    )


def unauthorized(message: str = "Authentication required") -> HTTPException:
    """401 for a missing, invalid or expired token."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"code": "unauthenticated", "message": message},
        headers={"WWW-Authenticate": "Bearer"},
    )
