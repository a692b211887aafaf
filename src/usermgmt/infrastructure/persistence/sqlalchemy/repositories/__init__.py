"""SQLAlchemy repository implementations."""

from usermgmt.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from usermgmt.infrastructure.persistence.sqlalchemy.repositories.role_repository import (  # NOQA: E501
    RoleRepositorySQLAlchemy,
    map_role_to_domain,
)
from usermgmt.infrastructure.persistence.sqlalchemy.repositories.user_profile_repository import (  # NOQA: E501
    UserProfileRepositorySQLAlchemy,
)

__all__ = [
    "RoleRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserProfileRepositorySQLAlchemy",
    "map_role_to_domain",
]
