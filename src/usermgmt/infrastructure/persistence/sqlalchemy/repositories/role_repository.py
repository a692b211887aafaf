"""SQLAlchemy implementation of RoleRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from usermgmt.domain.role import (
    Role,
    RoleAlreadyExistsError,
    RoleNotFoundError,
    RoleRepository,
)
from usermgmt.domain.shared.time import ensure_tz_aware
from usermgmt.infrastructure.persistence.sqlalchemy.models import RoleModel
from usermgmt.infrastructure.persistence.sqlalchemy.repositories._utils import (
    violates_unique,
)

logger = logging.getLogger(__name__)


def map_role_to_domain(model: RoleModel) -> Role:
    return Role.reconstitute(
        id=model.id,
        name=model.name,
        guid=model.guid,
        created_on=ensure_tz_aware(model.created_on),
        updated_on=ensure_tz_aware(model.updated_on),
    )


class RoleRepositorySQLAlchemy(RoleRepository):
    """SQLAlchemy implementation of the RoleRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, role_id: int) -> Optional[Role]:
        model = await self._find_model_by_id(role_id)

        if model is None:
            return None

        return map_role_to_domain(model)

    async def get_all(self) -> list[Role]:
        result = await self._session.execute(select(RoleModel))
        return [map_role_to_domain(model) for model in result.scalars().all()]

    async def create(self, role: Role) -> Role:
        if not role.has_empty_guid and await self._guid_taken(role):
            raise RoleAlreadyExistsError(guid=role.guid)

        if await self._name_taken(role.name):
            raise RoleAlreadyExistsError(name=role.name)

        model = RoleModel(name=role.name, guid=role.guid)
        self._session.add(model)
        await self._flush(role.name)

        logger.info("Created role: %s (id: %s)", model.name, model.id)
        return map_role_to_domain(model)

    async def update(self, role_update: Role) -> Role:
        existing = await self._find_model_by_id(role_update.id)
        if existing is None:
            raise RoleNotFoundError(role_update.id)

        if await self._name_taken(role_update.name, exclude_id=existing.id):
            raise RoleAlreadyExistsError(
                name=role_update.name,
                message=(
                    f"Another role with the name '{role_update.name}' already exists."
                ),
            )

        role = map_role_to_domain(existing)
        role.rename(role_update.name)
        existing.name = role.name
        await self._flush(role.name)

        logger.debug("Updated role: %s", existing.id)
        return map_role_to_domain(existing)

    async def _find_model_by_id(self, role_id: int | None) -> Optional[RoleModel]:
        if role_id is None:
            return None
        return await self._session.get(RoleModel, role_id)

    async def _guid_taken(self, role: Role) -> bool:
        stmt = select(RoleModel.id).where(RoleModel.guid == role.guid).limit(1)
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def _name_taken(self, name: str, exclude_id: int | None = None) -> bool:
        stmt = select(RoleModel.id).where(RoleModel.name == name)
        if exclude_id is not None:
            stmt = stmt.where(RoleModel.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        return result.first() is not None

    async def _flush(self, name: str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            # A concurrent writer won the race past the pre-checks
            if violates_unique(e, "roles", "name"):
                raise RoleAlreadyExistsError(name=name) from e
            raise
