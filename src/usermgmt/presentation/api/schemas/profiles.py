"""User profile schemas for API request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from usermgmt.domain.profile import BIO_MAX_LENGTH, PROFILE_NAME_MAX_LENGTH
from usermgmt.presentation.api.schemas.roles import RoleResponse, reject_empty_guid


class UserProfileCreateRequest(BaseModel):
    """Request schema for creating a user profile."""

    name: str = Field(..., min_length=1, max_length=PROFILE_NAME_MAX_LENGTH)
    email: EmailStr = Field(..., description="Unique email address")
    bio: Optional[str] = Field(None, max_length=BIO_MAX_LENGTH)
    role_id: int = Field(..., gt=0, description="Id of an existing role")
    receive_newsletter: bool = False
    id: Optional[int] = Field(
        None,
        gt=0,
        description="Explicit id; assigned by the database when omitted",
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
            "examples": [
                {
                    "name": "Alice",
                    "email": "alice@example.com",
                    "role_id": 2,
                    "receive_newsletter": True,
                },
            ],
        },
    }


class UserProfileUpdateRequest(BaseModel):
    """Request schema for overwriting a user profile."""

    id: int = Field(..., gt=0, description="Id of the profile to update")
    name: str = Field(..., min_length=1, max_length=PROFILE_NAME_MAX_LENGTH)
    email: EmailStr
    bio: Optional[str] = Field(None, max_length=BIO_MAX_LENGTH)
    role_id: int = Field(..., gt=0)
    receive_newsletter: bool = False


class UserProfileResponse(BaseModel):
    """Response schema for a user profile.

    ``role`` is only filled on reads; create and update responses carry
    ``role_id`` alone.
    """

    id: int
    guid: UUID
    name: str
    email: str
    bio: Optional[str] = None
    role_id: int
    receive_newsletter: bool
    created_on: datetime
    updated_on: datetime
    role: Optional[RoleResponse] = None


class UserProfileListResponse(BaseModel):
    """Response schema for listing user profiles."""

    profiles: list[UserProfileResponse]
    total: int = Field(..., description="Number of profiles returned")
