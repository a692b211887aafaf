"""Role schemas for API request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from usermgmt.domain.role import ROLE_NAME_MAX_LENGTH
from usermgmt.domain.shared import EMPTY_GUID


def reject_empty_guid(value: Optional[UUID]) -> Optional[UUID]:
    """Refuse the all-zero guid; omit the field to get a generated one."""
    if value == EMPTY_GUID:
        raise ValueError("Guid must not be empty.")
    return value


class RoleCreateRequest(BaseModel):
    """Request schema for creating a role."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=ROLE_NAME_MAX_LENGTH,
        description="Unique role name (case-sensitive)",
    )
    guid: Optional[UUID] = Field(
        None,
        description="Stable external identifier; generated when omitted",
    )

    @field_validator("guid")
    @classmethod
    def _validate_guid(cls, v: Optional[UUID]) -> Optional[UUID]:
        return reject_empty_guid(v)

    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "Editor"}],
        },
    }


class RoleUpdateRequest(BaseModel):
    """Request schema for renaming a role."""

    id: int = Field(..., gt=0, description="Id of the role to update")
    name: str = Field(..., min_length=1, max_length=ROLE_NAME_MAX_LENGTH)


class RoleResponse(BaseModel):
    """Response schema for a role."""

    id: int
    guid: UUID
    name: str
    created_on: datetime
    updated_on: datetime

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": 2,
                    "guid": "b2c3d4e5-f6a7-8899-a0b1-cdef12345678",
                    "name": "Admin",
                    "created_on": "2025-01-01T00:00:00Z",
                    "updated_on": "2025-01-01T00:00:00Z",
                },
            ],
        },
    }


class RoleListResponse(BaseModel):
    """Response schema for listing roles."""

    roles: list[RoleResponse]
    total: int = Field(..., description="Number of roles returned")
