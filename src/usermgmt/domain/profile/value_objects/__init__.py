"""User profile value objects."""

from usermgmt.domain.profile.value_objects.email import EMAIL_MAX_LENGTH, Email

__all__ = ["EMAIL_MAX_LENGTH", "Email"]
