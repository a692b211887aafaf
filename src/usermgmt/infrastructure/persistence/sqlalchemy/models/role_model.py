"""SQLAlchemy model for Role entities."""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from usermgmt.domain.role import ROLE_NAME_MAX_LENGTH
from usermgmt.infrastructure.persistence.sqlalchemy.models.base import (
    AuditMixin,
    Base,
)


class RoleModel(Base, AuditMixin):
    """SQLAlchemy model for persisting roles.

    Has no relationship back to user profiles; the association is
    navigable from the profile side only.
    """

    __tablename__ = "roles"
    __table_args__ = (UniqueConstraint("name", name="uq_roles_name"),)

    name: Mapped[str] = mapped_column(String(ROLE_NAME_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<RoleModel(id={self.id}, name={self.name})>"
