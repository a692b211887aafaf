"""Role repository interfaces."""

from usermgmt.domain.role.repositories.role_repository import RoleRepository

__all__ = ["RoleRepository"]
