"""Role repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from usermgmt.domain.role.entities import Role


class RoleRepository(ABC):
    """Repository interface for Role entities."""

    @abstractmethod
    async def get_by_id(self, role_id: int) -> Optional[Role]:
        """
        Find a role by its id.

        Parameters
        ----------
        role_id
            Store-assigned role id

        Returns
        -------
        Role if found, None otherwise
        """

    @abstractmethod
    async def get_all(self) -> list[Role]:
        """
        Return every stored role.

        Order is unspecified; callers sort when they need to.
        """

    @abstractmethod
    async def create(self, role: Role) -> Role:
        """
        Persist a new role.

        The guid check only runs for a non-empty guid; the name check
        always runs.

        Parameters
        ----------
        role
            The role to create

        Returns
        -------
        The stored role, including its store-assigned id and audit timestamps

        Raises
        ------
        RoleAlreadyExistsError
            If another role already uses the guid or the name
        """

    @abstractmethod
    async def update(self, role_update: Role) -> Role:
        """
        Rename an existing role.

        Only ``name`` is applied; id, guid and created_on are left as stored.

        Parameters
        ----------
        role_update
            Carries the id of the role to change and its new name

        Returns
        -------
        The updated role

        Raises
        ------
        RoleNotFoundError
            If no role has ``role_update.id``
        RoleAlreadyExistsError
            If a different role already has the new name
        """
