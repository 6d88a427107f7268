"""
Domain exceptions for the Reverie application.

This module defines domain-level exceptions that represent invalid input to
the domain model. These exceptions are independent of infrastructure concerns.
"""

from typing import Any


class ReverieException(Exception):
    """
    Base exception for all Reverie application errors.

    All custom exceptions should inherit from this class to allow
    for consistent error handling and logging.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code for API responses
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(ReverieException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        merged: dict[str, Any] = {"field": field} if field else {}
        merged.update(details or {})
        super().__init__(message, "VALIDATION_ERROR", merged)


class InvalidIdError(ValidationException):
    """Raised when a raw value is not a valid version 7 identifier."""

    def __init__(self, kind: str, value: Any):
        self.kind = kind
        self.value = value
        super().__init__(
            f"Invalid {kind}: {value!r}",
            field="id",
            details={"kind": kind, "value": str(value)},
        )


class InvalidUsernameError(ValidationException):
    """Raised when a username violates its length rules."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid username {value!r}: {reason}",
            field="username",
            details={"value": value, "reason": str(reason)},
        )


class InvalidProjectNameError(ValidationException):
    """Raised when a project name violates its length rules."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid project name {value!r}: {reason}",
            field="project_name",
            details={"value": value, "reason": str(reason)},
        )


class InvalidPageError(ValidationException):
    """Raised when a page request has a non-positive number or size."""

    def __init__(self, page: int, size: int):
        self.page = page
        self.size = size
        super().__init__(
            f"Page number and size must be positive (page={page}, size={size})",
            field="page",
            details={"page": page, "size": size},
        )
