"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions should inherit from DomainException
to enable centralized exception handling in the presentation layer.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_ROLE_NAME = "INVALID_ROLE_NAME"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    ROLE_NOT_FOUND = "ROLE_NOT_FOUND"
    USER_PROFILE_NOT_FOUND = "USER_PROFILE_NOT_FOUND"

    # A profile references a role that does not exist (400)
    ROLE_REFERENCE_NOT_FOUND = "ROLE_REFERENCE_NOT_FOUND"

    # Conflict Errors (400)
    CONFLICT = "CONFLICT"
    DUPLICATE_ROLE_NAME = "DUPLICATE_ROLE_NAME"
    DUPLICATE_ROLE_GUID = "DUPLICATE_ROLE_GUID"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_IDENTITY = "DUPLICATE_IDENTITY"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    This exception provides structured error information that can be
    used by the presentation layer to generate consistent API responses.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class DuplicateIdentityError(DomainException):
    """Raised when a new record reuses the id or guid of an existing one.

    Kept apart from ConflictError: a natural-key clash (name, email) is a
    conflict with another record, while this one means the caller supplied
    an identity that is already taken.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DUPLICATE_IDENTITY,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class InvalidFieldError(ValidationError):
    """Raised when a single field violates its contract."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            message=reason,
            code=ErrorCode.VALIDATION_ERROR,
            details={"field": field},
        )
        self.field = field
