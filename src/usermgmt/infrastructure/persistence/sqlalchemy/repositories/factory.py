"""SQLAlchemy repository factory for session-scoped repositories."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from usermgmt.infrastructure.persistence.sqlalchemy.repositories.role_repository import (  # NOQA: E501
    RoleRepositorySQLAlchemy,
)
from usermgmt.infrastructure.persistence.sqlalchemy.repositories.user_profile_repository import (  # NOQA: E501
    UserProfileRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._role_repo: RoleRepositorySQLAlchemy | None = None
        self._profile_repo: UserProfileRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def role_repository(self) -> RoleRepositorySQLAlchemy:
        if self._role_repo is None:
            self._role_repo = RoleRepositorySQLAlchemy(self._session)
        return self._role_repo

    def user_profile_repository(self) -> UserProfileRepositorySQLAlchemy:
        if self._profile_repo is None:
            self._profile_repo = UserProfileRepositorySQLAlchemy(self._session)
        return self._profile_repo
