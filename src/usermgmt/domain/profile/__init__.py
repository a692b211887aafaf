"""Profile domain - person records attached to exactly one role.

Design notes:
- Email is unique across profiles (exact match)
- role_id must reference an existing role; deleting a role cascades
- The role association is one-directional (profile -> role)
"""

from usermgmt.domain.profile.entities import (
    BIO_MAX_LENGTH,
    PROFILE_NAME_MAX_LENGTH,
    UserProfile,
)
from usermgmt.domain.profile.exceptions import (
    DuplicateUserProfileIdentityError,
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserProfileNotFoundError,
)
from usermgmt.domain.profile.repositories import UserProfileRepository
from usermgmt.domain.profile.value_objects import EMAIL_MAX_LENGTH, Email

__all__ = [
    "BIO_MAX_LENGTH",
    "DuplicateUserProfileIdentityError",
    "EMAIL_MAX_LENGTH",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "PROFILE_NAME_MAX_LENGTH",
    "UserProfile",
    "UserProfileNotFoundError",
    "UserProfileRepository",
]
