"""Automatic audit timestamps for every flush.

A ``before_flush`` listener on the ORM ``Session`` class stamps every
record that carries ``AuditMixin``:

- pending (newly added) records get ``created_on = updated_on = now``
- dirty (modified) records get ``updated_on = now``, or one microsecond
  past the stored value when the clock has not moved beyond it; a changed
  ``created_on`` is put back to its persisted value

Objects without the mixin are left alone. Core ``insert()`` statements
(used for seed data) do not flush through the session and keep the
timestamps they were given.
"""

import logging
from datetime import datetime, timedelta
from typing import Any

from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from usermgmt.domain.shared.time import ensure_tz_aware, utc_now
from usermgmt.infrastructure.persistence.sqlalchemy.models.base import AuditMixin

logger = logging.getLogger(__name__)


def stamp_audit_fields(session: Session) -> None:
    """Apply audit timestamps to the pending changes of ``session``."""
    if not session.new and not session.dirty:
        return

    now = utc_now()

    for record in session.new:
        if isinstance(record, AuditMixin):
            record.created_on = now
            record.updated_on = now

    for record in session.dirty:
        if isinstance(record, AuditMixin):
            _restore_created_on(record)
            record.updated_on = _next_updated_on(record, now)


def _next_updated_on(record: AuditMixin, now: datetime) -> datetime:
    history = inspect(record).attrs.updated_on.history
    stored = history.deleted or history.unchanged
    if not stored or stored[0] is None:
        return now
    previous = ensure_tz_aware(stored[0])
    if now > previous:
        return now
    return previous + timedelta(microseconds=1)


def _restore_created_on(record: AuditMixin) -> None:
    history = inspect(record).attrs.created_on.history
    if not history.has_changes():
        return
    if history.deleted:
        logger.debug(
            "Ignoring change to created_on of %s (id=%s)",
            type(record).__name__,
            record.id,
        )
        record.created_on = history.deleted[0]


@event.listens_for(Session, "before_flush")
def _before_flush(session: Session, flush_context: Any, instances: Any) -> None:
    stamp_audit_fields(session)
