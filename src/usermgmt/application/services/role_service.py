"""Application service for role reads and writes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from usermgmt.application.factories import RepositoryFactory
    from usermgmt.domain.role import Role, RoleRepository

logger = logging.getLogger(__name__)


class RoleService:
    """Thin facade over the role repository."""

    def __init__(self, role_repository: RoleRepository):
        self._role_repo = role_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RoleService:
        return cls(role_repository=factory.role_repository())

    async def get_role(self, role_id: int) -> Optional[Role]:
        return await self._role_repo.get_by_id(role_id)

    async def list_roles(self) -> list[Role]:
        return await self._role_repo.get_all()

    async def create_role(self, role: Role) -> Role:
        created = await self._role_repo.create(role)
        logger.debug("Role %s created through service", created.id)
        return created

    async def update_role(self, role: Role) -> Role:
        return await self._role_repo.update(role)
