"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each class carries the status code an outer API layer would answer with.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    status_code = 500
    error_code = "error"

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    status_code = 400
    error_code = "validation_error"


class UnauthorizedError(ValidationError):
    """The acting user may not perform this operation."""

    status_code = 403
    error_code = "unauthorized"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist (or has been soft-deleted)."""

    status_code = 404
    error_code = "not_found"


class ConflictError(DomainException):
    """The aggregate changed since it was read; the caller may retry."""

    status_code = 409
    error_code = "conflict"


class FatalError(DomainException):
    """Persistence or lookup I/O failed."""

    status_code = 500
    error_code = "fatal"
