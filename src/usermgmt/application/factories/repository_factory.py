"""Repository factory protocol for application layer."""

from typing import Any, Protocol

from usermgmt.domain.profile import UserProfileRepository
from usermgmt.domain.role import RoleRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories that share one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def role_repository(self) -> RoleRepository:
        """Get role repository."""
        ...

    def user_profile_repository(self) -> UserProfileRepository:
        """Get user profile repository."""
        ...
