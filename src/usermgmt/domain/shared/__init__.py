"""Shared domain building blocks: base record, exceptions, time helpers."""

from usermgmt.domain.shared.base_record import EMPTY_GUID, BaseRecord, is_empty_guid
from usermgmt.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    DuplicateIdentityError,
    EntityNotFoundError,
    ErrorCode,
    InvalidFieldError,
    ValidationError,
)
from usermgmt.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "BaseRecord",
    "ConflictError",
    "DomainException",
    "DuplicateIdentityError",
    "EMPTY_GUID",
    "EntityNotFoundError",
    "ErrorCode",
    "InvalidFieldError",
    "ValidationError",
    "ensure_tz_aware",
    "is_empty_guid",
    "utc_now",
]
