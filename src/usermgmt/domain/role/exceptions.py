"""Role domain exceptions."""

from uuid import UUID

from usermgmt.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class RoleNotFoundError(EntityNotFoundError):
    """Raised when a role id does not match any stored role."""

    def __init__(self, role_id: int, message: str | None = None) -> None:
        super().__init__(
            message=message or f"Role with Id '{role_id}' does not exist.",
            code=ErrorCode.ROLE_NOT_FOUND,
            details={"role_id": role_id},
        )
        self.role_id = role_id


class RoleReferenceNotFoundError(RoleNotFoundError):
    """Raised when a profile being written points at a role that does not exist.

    Still a NotFound error, but the missing role is part of the request
    body rather than the addressed resource.
    """

    def __init__(self, role_id: int, message: str | None = None) -> None:
        super().__init__(role_id, message=message)
        self.code = ErrorCode.ROLE_REFERENCE_NOT_FOUND


class RoleAlreadyExistsError(ConflictError):
    """Raised when a role name or guid is already taken by another role."""

    def __init__(
        self,
        name: str | None = None,
        guid: UUID | None = None,
        message: str | None = None,
    ) -> None:
        if guid is not None:
            msg = f"A Role with Guid '{guid}' already exists."
            code = ErrorCode.DUPLICATE_ROLE_GUID
        else:
            msg = f"A Role with name '{name}' already exists."
            code = ErrorCode.DUPLICATE_ROLE_NAME
        super().__init__(
            message=message or msg,
            code=code,
            details={"name": name, "guid": str(guid) if guid else None},
        )


class InvalidRoleNameError(ValidationError):
    """Raised when a role name is empty or too long."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message=reason,
            code=ErrorCode.INVALID_ROLE_NAME,
            details={"field": "name"},
        )
