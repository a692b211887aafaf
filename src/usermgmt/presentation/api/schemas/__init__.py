"""API request/response schemas."""

from usermgmt.presentation.api.schemas.profiles import (
    UserProfileCreateRequest,
    UserProfileListResponse,
    UserProfileResponse,
    UserProfileUpdateRequest,
)
from usermgmt.presentation.api.schemas.roles import (
    RoleCreateRequest,
    RoleListResponse,
    RoleResponse,
    RoleUpdateRequest,
)

__all__ = [
    "RoleCreateRequest",
    "RoleListResponse",
    "RoleResponse",
    "RoleUpdateRequest",
    "UserProfileCreateRequest",
    "UserProfileListResponse",
    "UserProfileResponse",
    "UserProfileUpdateRequest",
]
