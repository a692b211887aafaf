"""Role domain - named permission categories referenced by user profiles.

Design notes:
- Role names are unique and compared case-sensitively
- The three initial roles (User, Admin, Moderator) are schema data
- Repository interface defined here, implementation in infrastructure
"""

from usermgmt.domain.role.entities import ROLE_NAME_MAX_LENGTH, Role
from usermgmt.domain.role.exceptions import (
    InvalidRoleNameError,
    RoleAlreadyExistsError,
    RoleNotFoundError,
    RoleReferenceNotFoundError,
)
from usermgmt.domain.role.initial_roles import (
    ADMIN_ROLE_ID,
    MODERATOR_ROLE_ID,
    SEED_TIMESTAMP,
    USER_ROLE_ID,
    get_initial_roles,
)
from usermgmt.domain.role.repositories import RoleRepository

__all__ = [
    "ADMIN_ROLE_ID",
    "InvalidRoleNameError",
    "MODERATOR_ROLE_ID",
    "ROLE_NAME_MAX_LENGTH",
    "Role",
    "RoleAlreadyExistsError",
    "RoleNotFoundError",
    "RoleReferenceNotFoundError",
    "RoleRepository",
    "SEED_TIMESTAMP",
    "USER_ROLE_ID",
    "get_initial_roles",
]
