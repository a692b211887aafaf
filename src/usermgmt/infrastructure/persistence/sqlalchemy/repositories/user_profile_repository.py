"""SQLAlchemy implementation of UserProfileRepository."""

import logging
from typing import Any, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from usermgmt.domain.profile import (
    DuplicateUserProfileIdentityError,
    EmailAlreadyExistsError,
    UserProfile,
    UserProfileNotFoundError,
    UserProfileRepository,
)
from usermgmt.domain.role import RoleReferenceNotFoundError
from usermgmt.domain.shared.time import ensure_tz_aware
from usermgmt.infrastructure.persistence.sqlalchemy.models import UserProfileModel
from usermgmt.infrastructure.persistence.sqlalchemy.repositories._utils import (
    sync_id_sequence,
    violates_foreign_key,
    violates_primary_key,
    violates_unique,
)
from usermgmt.infrastructure.persistence.sqlalchemy.repositories.role_repository import (  # NOQA: E501
    map_role_to_domain,
)

logger = logging.getLogger(__name__)


class UserProfileRepositorySQLAlchemy(UserProfileRepository):
    """SQLAlchemy implementation of the UserProfileRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, profile_id: int) -> UserProfile:
        stmt = (
            select(UserProfileModel)
            .options(joinedload(UserProfileModel.role))
            .where(UserProfileModel.id == profile_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            raise UserProfileNotFoundError(profile_id)

        return self._map_to_domain(model, include_role=True)

    async def get_all(self) -> list[UserProfile]:
        stmt = (
            select(UserProfileModel)
            .options(joinedload(UserProfileModel.role))
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return [
            self._map_to_domain(model, include_role=True)
            for model in result.scalars().all()
        ]

    async def create(self, profile: UserProfile) -> UserProfile:
        # Identity check: id and guid in one query
        identity = [UserProfileModel.guid == profile.guid]
        if profile.id is not None:
            identity.append(UserProfileModel.id == profile.id)
        stmt = select(UserProfileModel.id).where(or_(*identity)).limit(1)
        result = await self._session.execute(stmt)
        if result.first() is not None:
            raise DuplicateUserProfileIdentityError(profile.id, profile.guid)

        if await self._email_taken(profile.email):
            raise EmailAlreadyExistsError(profile.email)

        model = self._map_to_model(profile)
        self._session.add(model)
        await self._flush(profile)
        if profile.id is not None:
            await sync_id_sequence(
                self._session,
                self._session.get_bind().dialect.name,
                UserProfileModel.__tablename__,
            )

        logger.info("Created user profile: %s (email: %s)", model.id, model.email)
        return self._map_to_domain(model, include_role=False)

    async def update(self, profile_update: UserProfile) -> UserProfile:
        existing = await self._find_model_by_id(profile_update.id)
        if existing is None:
            raise UserProfileNotFoundError(profile_update.id)

        if await self._email_taken(profile_update.email, exclude_id=existing.id):
            raise EmailAlreadyExistsError(profile_update.email)

        profile = self._map_to_domain(existing, include_role=False)
        profile.apply_update(profile_update)
        self._update_model(existing, profile)
        await self._flush(profile)

        logger.debug("Updated user profile: %s", existing.id)
        return self._map_to_domain(existing, include_role=False)

    async def _find_model_by_id(
        self,
        profile_id: int | None,
    ) -> Optional[UserProfileModel]:
        if profile_id is None:
            return None
        return await self._session.get(UserProfileModel, profile_id)

    async def _email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        stmt = select(UserProfileModel.id).where(UserProfileModel.email == email)
        if exclude_id is not None:
            stmt = stmt.where(UserProfileModel.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        return result.first() is not None

    async def _flush(self, profile: UserProfile) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            # Constraint violations that slipped past the pre-checks
            if violates_unique(e, "user_profiles", "email"):
                raise EmailAlreadyExistsError(profile.email) from e
            if violates_unique(e, "user_profiles", "guid") or violates_primary_key(
                e, "user_profiles"
            ):
                raise DuplicateUserProfileIdentityError(profile.id, profile.guid) from e
            if violates_foreign_key(e):
                raise RoleReferenceNotFoundError(profile.role_id) from e
            raise

    def _map_to_domain(
        self,
        model: UserProfileModel,
        include_role: bool,
    ) -> UserProfile:
        return UserProfile.reconstitute(
            id=model.id,
            guid=model.guid,
            name=model.name,
            email=model.email,
            role_id=model.role_id,
            bio=model.bio,
            receive_newsletter=model.receive_newsletter,
            created_on=ensure_tz_aware(model.created_on),
            updated_on=ensure_tz_aware(model.updated_on),
            role=map_role_to_domain(model.role) if include_role else None,
        )

    def _map_to_model(self, profile: UserProfile) -> UserProfileModel:
        values: dict[str, Any] = {
            "guid": profile.guid,
            "name": profile.name,
            "email": profile.email,
            "bio": profile.bio,
            "role_id": profile.role_id,
            "receive_newsletter": profile.receive_newsletter,
        }
        if profile.id is not None:
            values["id"] = profile.id
        return UserProfileModel(**values)

    def _update_model(self, model: UserProfileModel, profile: UserProfile) -> None:
        # id, guid and created_on never change
        model.name = profile.name
        model.email = profile.email
        model.bio = profile.bio
        model.role_id = profile.role_id
        model.receive_newsletter = profile.receive_newsletter
