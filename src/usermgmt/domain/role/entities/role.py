"""Role entity."""

from datetime import datetime
from uuid import UUID

from usermgmt.domain.role.exceptions import InvalidRoleNameError
from usermgmt.domain.shared.base_record import BaseRecord

ROLE_NAME_MAX_LENGTH = 50


def _validate_name(name: str) -> str:
    if not name or not name.strip():
        raise InvalidRoleNameError("Role name is required.")
    if len(name) > ROLE_NAME_MAX_LENGTH:
        msg = f"Role name cannot be longer than {ROLE_NAME_MAX_LENGTH} characters."
        raise InvalidRoleNameError(msg)
    return name


class Role(BaseRecord):
    """A named permission category referenced by user profiles."""

    def __init__(
        self,
        name: str,
        id: int | None = None,
        guid: UUID | None = None,
        created_on: datetime | None = None,
        updated_on: datetime | None = None,
    ):
        super().__init__(
            id=id,
            guid=guid,
            created_on=created_on,
            updated_on=updated_on,
        )
        self._name = _validate_name(name)

    @property
    def name(self) -> str:
        return self._name

    def rename(self, name: str) -> None:
        self._name = _validate_name(name)

    @classmethod
    def create(cls, name: str, guid: UUID | None = None) -> "Role":
        return cls(name=name, guid=guid)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        name: str,
        guid: UUID,
        created_on: datetime,
        updated_on: datetime,
    ) -> "Role":
        return cls(
            id=id,
            name=name,
            guid=guid,
            created_on=created_on,
            updated_on=updated_on,
        )

    def __repr__(self) -> str:
        return f"Role(id={self._id}, name={self._name!r})"
