"""Interface layer errors and their HTTP translation."""

import logfire
from fastapi import HTTPException, status

from discuss.domain.error import (
    AccessDeniedError,
    DomainError,
    DuplicateError,
    NotFoundError,
    ValidationError,
)

# Checked in order; the first matching base class wins
STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (DuplicateError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error into the HTTP error returned to clients.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException carrying the error message as detail
    """
    status_code = next(
        (code for error_type, code in STATUS_CODES if isinstance(error, error_type)),
        status.HTTP_400_BAD_REQUEST,
    )
    logfire.warn(
        "Request rejected",
        error=str(error),
        error_type=type(error).__name__,
        status_code=status_code,
    )
    return HTTPException(status_code=status_code, detail=str(error))


def rejected_save(resource: str) -> HTTPException:
    """HTTP error for a write the store refused."""
    logfire.warn("Save rejected by store", resource=resource)
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=f"{resource} could not be saved",
    )
