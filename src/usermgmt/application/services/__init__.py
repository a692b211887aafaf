"""Application layer services."""

from usermgmt.application.services.role_service import RoleService
from usermgmt.application.services.user_profile_service import UserProfileService

__all__ = ["RoleService", "UserProfileService"]
