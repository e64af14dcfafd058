"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from notes_api.core.validation import Violation


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class ValidationError(ApplicationError):
    """Raised when a payload violates one or more field rules."""

    def __init__(
        self,
        message: str = "Validation failed",
        violations: list["Violation"] | None = None,
    ) -> None:
        self.violations = violations or []
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class DecodeError(ApplicationError):
    """Raised when a request body cannot be decoded."""

    def __init__(self, message: str = "Malformed request body") -> None:
        super().__init__(message, code="VAL_DECODE_ERROR")


class ConflictError(ApplicationError):
    """Raised when a write collides with a unique key."""

    def __init__(self, message: str = "Resource conflict") -> None:
        super().__init__(message, code="RES_CONFLICT")


class StoreError(ApplicationError):
    """Raised when a database operation fails."""

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message, code="SYS_DATABASE_ERROR")
