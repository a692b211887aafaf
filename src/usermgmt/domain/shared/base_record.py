"""Identity and audit fields shared by every persisted record."""

from datetime import datetime
from uuid import UUID, uuid4

from usermgmt.domain.shared.exceptions import InvalidFieldError
from usermgmt.domain.shared.time import ensure_tz_aware

# All-zero guid; never considered when guid uniqueness is checked.
EMPTY_GUID = UUID(int=0)


def is_empty_guid(guid: UUID | None) -> bool:
    return guid is None or guid == EMPTY_GUID


class BaseRecord:
    """
    Common identity and audit state of Role and UserProfile.

    ``id`` is assigned by the store on first flush and stays ``None`` until
    then. ``guid`` defaults to a fresh UUID4 when not supplied; an explicit
    all-zero guid is kept as given. ``created_on``/``updated_on`` are owned
    by the persistence layer and only carried here.
    """

    def __init__(
        self,
        id: int | None = None,
        guid: UUID | None = None,
        created_on: datetime | None = None,
        updated_on: datetime | None = None,
    ):
        if id is not None and id < 0:
            raise InvalidFieldError("id", "Id must be greater than or equal to 0.")
        self._id = id
        self._guid = uuid4() if guid is None else guid
        self._created_on = ensure_tz_aware(created_on) if created_on else None
        self._updated_on = ensure_tz_aware(updated_on) if updated_on else None

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def guid(self) -> UUID:
        return self._guid

    @property
    def has_empty_guid(self) -> bool:
        return is_empty_guid(self._guid)

    @property
    def created_on(self) -> datetime | None:
        return self._created_on

    @property
    def updated_on(self) -> datetime | None:
        return self._updated_on

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseRecord) or type(self) is not type(other):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return id(self)
        return hash((type(self).__name__, self._id))
