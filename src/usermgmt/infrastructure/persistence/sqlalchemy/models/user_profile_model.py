"""SQLAlchemy model for UserProfile entities."""

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from usermgmt.domain.profile import (
    BIO_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    PROFILE_NAME_MAX_LENGTH,
)
from usermgmt.infrastructure.persistence.sqlalchemy.models.base import (
    AuditMixin,
    Base,
    RecordId,
)
from usermgmt.infrastructure.persistence.sqlalchemy.models.role_model import RoleModel


class UserProfileModel(Base, AuditMixin):
    """SQLAlchemy model for persisting user profiles."""

    __tablename__ = "user_profiles"
    __table_args__ = (
        UniqueConstraint("email", name="uq_user_profiles_email"),
        UniqueConstraint("guid", name="uq_user_profiles_guid"),
    )

    name: Mapped[str] = mapped_column(String(PROFILE_NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False)
    bio: Mapped[Optional[str]] = mapped_column(String(BIO_MAX_LENGTH), nullable=True)
    role_id: Mapped[int] = mapped_column(
        RecordId,
        ForeignKey("roles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    receive_newsletter: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    # Only loaded through explicit eager-load options
    role: Mapped[RoleModel] = relationship(lazy="raise")

    def __repr__(self) -> str:
        return f"<UserProfileModel(id={self.id}, email={self.email})>"
