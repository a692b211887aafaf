"""Unit tests for the before_flush audit listener."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from sqlalchemy import select, update

from usermgmt.domain.role import ADMIN_ROLE_ID, SEED_TIMESTAMP
from usermgmt.domain.shared import ensure_tz_aware, utc_now
from usermgmt.infrastructure.persistence.sqlalchemy.audit import stamp_audit_fields
from usermgmt.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserProfileModel,
)


class TestAuditListener:
    """Test suite for automatic created_on/updated_on stamping."""

    @pytest.mark.asyncio
    async def test_new_records_get_equal_timestamps(self, async_session):
        """Inserted records get created_on == updated_on."""
        # Arrange
        model = RoleModel(name="Editor", guid=uuid4())
        async_session.add(model)

        # Act
        await async_session.flush()

        # Assert
        assert model.created_on is not None
        assert model.created_on == model.updated_on

    @pytest.mark.asyncio
    async def test_caller_supplied_timestamps_are_overwritten(self, async_session):
        """Timestamps passed in by the caller do not survive an insert."""
        # Arrange
        stale = datetime(2000, 1, 1, tzinfo=timezone.utc)
        model = RoleModel(
            name="Editor",
            guid=uuid4(),
            created_on=stale,
            updated_on=stale,
        )
        async_session.add(model)

        # Act
        await async_session.flush()

        # Assert
        assert model.created_on > stale
        assert model.updated_on == model.created_on

    @pytest.mark.asyncio
    async def test_modified_records_get_new_updated_on(self, async_session):
        """Modifying a record moves updated_on and leaves created_on alone."""
        # Arrange
        model = await async_session.get(RoleModel, ADMIN_ROLE_ID)
        model.name = "Administrator"

        # Act
        await async_session.flush()

        # Assert
        assert ensure_tz_aware(model.created_on) == SEED_TIMESTAMP
        assert ensure_tz_aware(model.updated_on) > SEED_TIMESTAMP

    @pytest.mark.asyncio
    async def test_updated_on_increases_when_stored_value_is_ahead(
        self,
        async_session,
    ):
        """A stored updated_on later than the clock is still exceeded."""
        # Arrange
        ahead = utc_now() + timedelta(hours=1)
        await async_session.execute(
            update(RoleModel)
            .where(RoleModel.id == ADMIN_ROLE_ID)
            .values(updated_on=ahead),
        )
        await async_session.commit()
        model = await async_session.get(RoleModel, ADMIN_ROLE_ID)
        model.name = "Administrator"

        # Act
        await async_session.flush()

        # Assert
        assert ensure_tz_aware(model.updated_on) > ahead

    @pytest.mark.asyncio
    async def test_created_on_cannot_be_changed(self, async_session):
        """A caller's change to created_on is reverted before the write."""
        # Arrange
        model = await async_session.get(RoleModel, ADMIN_ROLE_ID)
        model.created_on = datetime(2030, 6, 1, tzinfo=timezone.utc)

        # Act
        await async_session.flush()
        await async_session.commit()

        # Assert
        result = await async_session.execute(
            select(RoleModel.created_on).where(RoleModel.id == ADMIN_ROLE_ID),
        )
        assert ensure_tz_aware(result.scalar_one()) == SEED_TIMESTAMP

    @pytest.mark.asyncio
    async def test_stamps_profiles_too(self, async_session):
        """The listener covers every model with the audit columns."""
        model = UserProfileModel(
            name="Alice",
            email="alice@example.com",
            role_id=ADMIN_ROLE_ID,
            guid=uuid4(),
        )
        async_session.add(model)

        await async_session.flush()

        assert model.created_on == model.updated_on

    def test_no_pending_changes_is_a_no_op(self):
        """An empty session is left untouched."""
        session = MagicMock(new=set(), dirty=set())

        stamp_audit_fields(session)

    def test_objects_without_audit_fields_are_ignored(self):
        plain = object()
        session = MagicMock(new={plain}, dirty=set())

        stamp_audit_fields(session)
