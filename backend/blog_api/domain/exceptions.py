"""Domain-specific exceptions — framework-independent.

Every expected failure is an ``AppError`` carrying the HTTP status it maps
to.  ``is_operational`` marks failures that are safe to describe verbatim to
the caller; anything else is treated as an internal fault.
"""

from dataclasses import dataclass


class AppError(Exception):
    """Base class for failures that resolve to a single HTTP status."""

    status_code: int = 500
    is_operational: bool = True

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def status(self) -> str:
        """``fail`` for client errors, ``error`` for server errors."""
        return "fail" if 400 <= self.status_code < 500 else "error"


@dataclass(frozen=True)
class Violation:
    """A single field-level validation problem."""

    location: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.location, "message": self.message}


class ValidationError(AppError):
    """Raised when request input is malformed or missing."""

    status_code = 400

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        summary = "; ".join(f"{v.location}: {v.message}" for v in self.violations)
        super().__init__(f"Invalid request: {summary}" if summary else "Invalid request")


class UnauthenticatedError(AppError):
    """Raised when a bearer credential is missing, malformed, invalid or expired."""

    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class InvalidCredentialsError(UnauthenticatedError):
    """Raised on failed login. Does not say which part was wrong."""

    def __init__(self):
        super().__init__("Invalid email or password")


class ForbiddenError(AppError):
    """Raised when an authenticated caller may not act on a resource."""

    status_code = 403

    def __init__(self, message: str = "You are not authorized to perform this action"):
        super().__init__(message)


class NotFoundError(AppError):
    """Raised when a requested resource or route does not exist."""

    status_code = 404


class EntityNotFoundError(NotFoundError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ConflictError(AppError):
    """Raised when a write would violate a uniqueness rule."""

    status_code = 400


class DuplicateEntityError(ConflictError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, message: str):
        self.entity_type = entity_type
        super().__init__(message)


class DuplicateUserError(DuplicateEntityError):
    """Raised on registration when the username or email is taken.

    The message does not say which one, so it cannot be used to probe for
    registered addresses.
    """

    def __init__(self):
        super().__init__("User", "User with this email or username already exists")


class InternalError(AppError):
    """Raised for unexpected faults; never described verbatim outside development."""

    status_code = 500
    is_operational = False
