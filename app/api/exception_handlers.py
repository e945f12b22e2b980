"""Global exception handlers that map domain exceptions to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.errors import (
    DUPLICATE_RESOURCE,
    FORBIDDEN,
    NOT_FOUND,
    VALIDATION_ERROR,
    DomainError,
    DomainValidationError,
    DuplicateResourceError,
    ForbiddenError,
    NotFoundError,
)
from app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

# Exception class -> (HTTP status, error code)
ERROR_RESPONSES: dict[type[DomainError], tuple[int, str]] = {
    DomainValidationError: (status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR),
    DuplicateResourceError: (status.HTTP_409_CONFLICT, DUPLICATE_RESOURCE),
    NotFoundError: (status.HTTP_404_NOT_FOUND, NOT_FOUND),
    ForbiddenError: (status.HTTP_403_FORBIDDEN, FORBIDDEN),
}


def _error_response(status_code: int, detail: str, code: str) -> JSONResponse:
    """Return a standardized error response with detail and machine-readable code."""
    body = ErrorResponse(detail=detail, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code, code = ERROR_RESPONSES.get(
        type(exc), (status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR)
    )
    logger.info(
        "%s %s -> %s %s: %s", request.method, request.url.path, status_code, code, exc
    )
    return _error_response(status_code, str(exc), code)


def register_exception_handlers(app):
    """Register domain exception handlers on the FastAPI app."""
    for exc_class in ERROR_RESPONSES:
        app.add_exception_handler(exc_class, domain_error_handler)
