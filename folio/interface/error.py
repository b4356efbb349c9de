"""Interface layer error translation.

Domain errors are turned into HTTP responses here. Public callers never
see store internals; admins get the underlying detail to help moderation.
"""

import logfire
from fastapi import HTTPException, status

from folio.domain.error import (
    DomainError,
    NotFoundError,
    StoreError,
    UnauthorizedError,
    ValidationError,
)

INTERNAL_ERROR_DETAIL = "Internal server error"


def to_http_exception(error: DomainError, *, admin: bool = False) -> HTTPException:
    """Map a domain error to an HTTPException.

    Args:
        error: The domain error raised by a use case
        admin: Whether the caller is a verified admin

    Returns:
        HTTPException with status code and caller-appropriate detail
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, UnauthorizedError):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error))

    if isinstance(error, StoreError):
        logfire.error(
            "Store error while handling request",
            operation=error.operation,
            error=error.detail,
        )
        detail = str(error) if admin else INTERNAL_ERROR_DETAIL
    else:
        logfire.error("Unhandled domain error", error=str(error), error_type=type(error).__name__)
        detail = INTERNAL_ERROR_DETAIL
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
