"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
VALIDATION_ERROR = "VALIDATION_ERROR"
FORBIDDEN = "FORBIDDEN"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class DuplicateResourceError(DomainError):
    """Raised when a create would duplicate an existing resource (e.g. a cohort member added twice)."""

    pass


class DomainValidationError(DomainError):
    """Raised when business rules fail (e.g. end date before start date, cohort full)."""

    pass


class ForbiddenError(DomainError):
    """Raised when the caller is authenticated but may not act on the resource."""

    pass
