"""User profile repository interfaces."""

from usermgmt.domain.profile.repositories.user_profile_repository import (
    UserProfileRepository,
)

__all__ = ["UserProfileRepository"]
