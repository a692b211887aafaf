"""Roles that every installation starts with.

These rows belong to the schema: ids, guids and timestamps are fixed and the
initialization step inserts them exactly once.
"""

from datetime import datetime, timezone
from uuid import UUID

from usermgmt.domain.role.entities import Role

SEED_TIMESTAMP = datetime(2025, 1, 1, tzinfo=timezone.utc)

USER_ROLE_ID = 1
ADMIN_ROLE_ID = 2
MODERATOR_ROLE_ID = 3

_INITIAL_ROLE_DATA: tuple[tuple[int, str, UUID], ...] = (
    (USER_ROLE_ID, "User", UUID("a1b2c3d4-e5f6-7788-99a0-bcdef1234567")),
    (ADMIN_ROLE_ID, "Admin", UUID("b2c3d4e5-f6a7-8899-a0b1-cdef12345678")),
    (MODERATOR_ROLE_ID, "Moderator", UUID("c3d4e5f6-a7b8-99a0-b1c2-def123456789")),
)


def get_initial_roles() -> list[Role]:
    """Return fresh Role instances for the seeded roles, ordered by id."""
    return [
        Role.reconstitute(
            id=role_id,
            name=name,
            guid=guid,
            created_on=SEED_TIMESTAMP,
            updated_on=SEED_TIMESTAMP,
        )
        for role_id, name, guid in _INITIAL_ROLE_DATA
    ]
