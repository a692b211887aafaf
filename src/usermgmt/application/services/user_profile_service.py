"""Application service for user profiles.

Profiles reference a role by id. Before a profile is written the service
confirms that the role exists, so a dangling reference surfaces as a
RoleReferenceNotFoundError with a message tailored to the operation
instead of a foreign key failure from the database.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from usermgmt.domain.role import RoleReferenceNotFoundError

if TYPE_CHECKING:
    from usermgmt.application.factories import RepositoryFactory
    from usermgmt.domain.profile import UserProfile, UserProfileRepository
    from usermgmt.domain.role import RoleRepository

logger = logging.getLogger(__name__)


class UserProfileService:
    """Orchestrates profile writes against the role and profile repositories."""

    def __init__(
        self,
        user_profile_repository: UserProfileRepository,
        role_repository: RoleRepository,
    ):
        self._profile_repo = user_profile_repository
        self._role_repo = role_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UserProfileService:
        return cls(
            user_profile_repository=factory.user_profile_repository(),
            role_repository=factory.role_repository(),
        )

    async def get_profile(self, profile_id: int) -> UserProfile:
        return await self._profile_repo.get_by_id(profile_id)

    async def list_profiles(self) -> list[UserProfile]:
        return await self._profile_repo.get_all()

    async def create_profile(self, profile: UserProfile) -> UserProfile:
        """
        Persist a new profile after confirming its role exists.

        Raises
        ------
        RoleReferenceNotFoundError
            If no role has ``profile.role_id``; nothing is written
        DuplicateUserProfileIdentityError
            If the id or guid is already taken
        EmailAlreadyExistsError
            If another profile uses the same email
        """
        await self._ensure_role_exists(profile.role_id, "create")
        created = await self._profile_repo.create(profile)
        logger.info("User profile %s created with role %s", created.id, created.role_id)
        return created

    async def update_profile(self, profile: UserProfile) -> UserProfile:
        """
        Overwrite a stored profile after confirming its role exists.

        Raises
        ------
        RoleReferenceNotFoundError
            If no role has ``profile.role_id``; nothing is written
        UserProfileNotFoundError
            If no profile has ``profile.id``
        EmailAlreadyExistsError
            If a different profile uses the same email
        """
        await self._ensure_role_exists(profile.role_id, "update")
        return await self._profile_repo.update(profile)

    async def _ensure_role_exists(self, role_id: int, action: str) -> None:
        role = await self._role_repo.get_by_id(role_id)
        if role is None:
            logger.warning("Cannot %s user profile: role %s missing", action, role_id)
            raise RoleReferenceNotFoundError(
                role_id,
                message=(
                    f"Role with Id '{role_id}' does not exist. "
                    f"Cannot {action} user profile."
                ),
            )
