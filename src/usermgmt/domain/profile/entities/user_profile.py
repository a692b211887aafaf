"""UserProfile entity."""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from usermgmt.domain.profile.value_objects.email import Email
from usermgmt.domain.role.entities import Role
from usermgmt.domain.shared.base_record import BaseRecord
from usermgmt.domain.shared.exceptions import InvalidFieldError

PROFILE_NAME_MAX_LENGTH = 100
BIO_MAX_LENGTH = 500


def _validate_name(name: str) -> str:
    if not name or not name.strip():
        raise InvalidFieldError("name", "Name is required.")
    if len(name) > PROFILE_NAME_MAX_LENGTH:
        msg = f"Name cannot be longer than {PROFILE_NAME_MAX_LENGTH} characters."
        raise InvalidFieldError("name", msg)
    return name


def _validate_bio(bio: Optional[str]) -> Optional[str]:
    if bio is not None and len(bio) > BIO_MAX_LENGTH:
        msg = f"Bio cannot be longer than {BIO_MAX_LENGTH} characters."
        raise InvalidFieldError("bio", msg)
    return bio


def _validate_role_id(role_id: int) -> int:
    if role_id is None or role_id <= 0:
        raise InvalidFieldError("role_id", "RoleId must be a positive number.")
    return role_id


class UserProfile(BaseRecord):
    """
    A person record attached to exactly one role.

    ``role`` is only populated by the read paths that eager-load it
    (``get_by_id``/``get_all``); create and update return the profile with
    ``role`` left as ``None``.
    """

    def __init__(  # noqa: PLR0913
        self,
        name: str,
        email: Union[str, Email],
        role_id: int,
        bio: Optional[str] = None,
        receive_newsletter: bool = False,
        id: int | None = None,
        guid: UUID | None = None,
        created_on: datetime | None = None,
        updated_on: datetime | None = None,
        role: Optional[Role] = None,
    ):
        super().__init__(
            id=id,
            guid=guid,
            created_on=created_on,
            updated_on=updated_on,
        )
        self._name = _validate_name(name)
        self._email = email if isinstance(email, Email) else Email(email)
        self._role_id = _validate_role_id(role_id)
        self._bio = _validate_bio(bio)
        self._receive_newsletter = receive_newsletter
        self._role = role

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def bio(self) -> Optional[str]:
        return self._bio

    @property
    def role_id(self) -> int:
        return self._role_id

    @property
    def role(self) -> Optional[Role]:
        return self._role

    @property
    def receive_newsletter(self) -> bool:
        return self._receive_newsletter

    def apply_update(self, other: "UserProfile") -> None:
        """Copy the mutable fields of ``other`` onto this profile."""
        self._name = other.name
        self._email = Email(other.email)
        self._bio = other.bio
        self._role_id = other.role_id
        self._receive_newsletter = other.receive_newsletter
        if self._role is not None and self._role.id != other.role_id:
            self._role = None

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        name: str,
        email: Union[str, Email],
        role_id: int,
        bio: Optional[str] = None,
        receive_newsletter: bool = False,
        guid: UUID | None = None,
    ) -> "UserProfile":
        return cls(
            name=name,
            email=email,
            role_id=role_id,
            bio=bio,
            receive_newsletter=receive_newsletter,
            guid=guid,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        guid: UUID,
        name: str,
        email: str,
        role_id: int,
        bio: Optional[str],
        receive_newsletter: bool,
        created_on: datetime,
        updated_on: datetime,
        role: Optional[Role] = None,
    ) -> "UserProfile":
        return cls(
            id=id,
            guid=guid,
            name=name,
            email=email,
            role_id=role_id,
            bio=bio,
            receive_newsletter=receive_newsletter,
            created_on=created_on,
            updated_on=updated_on,
            role=role,
        )

    def __repr__(self) -> str:
        return f"UserProfile(id={self._id}, email={self._email.value})"
