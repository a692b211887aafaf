"""SQLAlchemy models for persistence layer."""

from usermgmt.infrastructure.persistence.sqlalchemy.models.base import (
    AuditMixin,
    Base,
)
from usermgmt.infrastructure.persistence.sqlalchemy.models.role_model import RoleModel
from usermgmt.infrastructure.persistence.sqlalchemy.models.user_profile_model import (
    UserProfileModel,
)

# Registers the before_flush audit listener alongside the models
from usermgmt.infrastructure.persistence.sqlalchemy import audit  # noqa: E402, F401, I001

__all__ = [
    "AuditMixin",
    "Base",
    "RoleModel",
    "UserProfileModel",
]
