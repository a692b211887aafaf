"""User profile domain entities."""

from usermgmt.domain.profile.entities.user_profile import (
    BIO_MAX_LENGTH,
    PROFILE_NAME_MAX_LENGTH,
    UserProfile,
)

__all__ = ["BIO_MAX_LENGTH", "PROFILE_NAME_MAX_LENGTH", "UserProfile"]
