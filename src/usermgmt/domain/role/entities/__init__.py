"""Role domain entities."""

from usermgmt.domain.role.entities.role import ROLE_NAME_MAX_LENGTH, Role

__all__ = ["ROLE_NAME_MAX_LENGTH", "Role"]
