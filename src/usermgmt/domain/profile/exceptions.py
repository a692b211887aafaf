"""User profile domain exceptions."""

from uuid import UUID

from usermgmt.domain.shared.exceptions import (
    ConflictError,
    DuplicateIdentityError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class UserProfileNotFoundError(EntityNotFoundError):
    """Raised when a profile id does not match any stored profile."""

    def __init__(self, profile_id: int | None) -> None:
        super().__init__(
            message=f"User Profile with Id '{profile_id}' does not exist.",
            code=ErrorCode.USER_PROFILE_NOT_FOUND,
            details={"profile_id": profile_id},
        )
        self.profile_id = profile_id


class EmailAlreadyExistsError(ConflictError):
    """Raised when another profile already uses the email address."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message=f"Another user profile with the email '{email}' already exists.",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )
        self.email = email


class DuplicateUserProfileIdentityError(DuplicateIdentityError):
    """Raised when a new profile reuses an existing profile's id or guid."""

    def __init__(self, profile_id: int | None, guid: UUID) -> None:
        super().__init__(
            message="UserProfile with this Id or Guid already exists.",
            details={"profile_id": profile_id, "guid": str(guid)},
        )


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_EMAIL,
            details={"field": "email"},
        )
