"""SQLAlchemy base configuration."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import BigInteger, DateTime, Integer, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from usermgmt.domain.shared.time import utc_now

# SQLite only auto-increments an INTEGER PRIMARY KEY.
RecordId = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    """Base class for all database models."""


class AuditMixin:
    """Identity and audit columns shared by every record table.

    ``created_on``/``updated_on`` are maintained by the ``before_flush``
    listener in ``audit``; the column default only covers Core inserts.
    """

    id: Mapped[int] = mapped_column(RecordId, primary_key=True, autoincrement=True)
    guid: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    created_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
