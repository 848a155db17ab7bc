"""
Exception hierarchy and the error payload returned to API clients.
"""

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from bestchoice.validation import Violation


class BestChoiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def details(self) -> dict[str, Any]:
        return {}


class NotFoundError(BestChoiceError):
    """A referenced student, project, keyword, skill or preference does not exist."""

    status_code = 404
    error_code = "NOT_FOUND"


class BusinessRuleError(BestChoiceError):
    """
    The request is well-formed but breaks a functional rule.

    Examples: a student already used this rank, or the project is full.
    """

    status_code = 400
    error_code = "BUSINESS_ERROR"


class UnauthorizedError(BestChoiceError):
    status_code = 401
    error_code = "UNAUTHORIZED"


class ForbiddenError(BestChoiceError):
    status_code = 403
    error_code = "FORBIDDEN"


class InvalidEnumValueError(BestChoiceError, ValueError):
    """Raised when a name does not match any member of an enumeration."""

    status_code = 400
    error_code = "VALIDATION_ERROR"

    def __init__(self, enum_name: str, value: Any, allowed: Sequence[str]):
        self.enum_name = enum_name
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"'{value}' is not a valid {enum_name}; expected one of: {', '.join(self.allowed)}"
        )


class RequestValidationFailed(BestChoiceError):
    """A request payload failed validation. Carries every violation found."""

    status_code = 400
    error_code = "VALIDATION_ERROR"

    def __init__(self, model_name: str, violations: Sequence["Violation"]):
        self.model_name = model_name
        self.violations = list(violations)
        super().__init__("Validation failed")

    def details(self) -> dict[str, Any]:
        fields: dict[str, str] = {}
        for violation in self.violations:
            # First violation per field wins, like a field-error map.
            fields.setdefault(violation.field, violation.message)
        return {"fields": fields}


class ApiError(BaseModel):
    """Error body returned by every exception handler."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: int
    error: str
    message: str
    path: str
    details: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def of(
        cls,
        status: int,
        error: str,
        message: str,
        path: str,
        details: dict[str, Any] | None = None,
    ) -> "ApiError":
        return cls(status=status, error=error, message=message, path=path, details=details or {})

    @classmethod
    def from_exception(cls, exc: BestChoiceError, path: str) -> "ApiError":
        return cls.of(exc.status_code, exc.error_code, exc.message, path, exc.details())


__all__ = [
    "BestChoiceError",
    "NotFoundError",
    "BusinessRuleError",
    "UnauthorizedError",
    "ForbiddenError",
    "InvalidEnumValueError",
    "RequestValidationFailed",
    "ApiError",
]
