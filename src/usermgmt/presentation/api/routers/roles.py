"""Roles router for role management endpoints."""

import logging

from fastapi import APIRouter, status

from usermgmt.application.services import RoleService
from usermgmt.domain.role import Role, RoleNotFoundError
from usermgmt.presentation.api.dependencies import RepoFactory
from usermgmt.presentation.api.schemas.roles import (
    RoleCreateRequest,
    RoleListResponse,
    RoleResponse,
    RoleUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def role_to_response(role: Role) -> RoleResponse:
    return RoleResponse(
        id=role.id,
        guid=role.guid,
        name=role.name,
        created_on=role.created_on,
        updated_on=role.updated_on,
    )


@router.get(
    "",
    summary="List roles",
    responses={
        200: {"description": "List of roles"},
    },
)
async def list_roles(factory: RepoFactory) -> RoleListResponse:
    roles = await RoleService.from_factory(factory).list_roles()
    return RoleListResponse(
        roles=[role_to_response(role) for role in roles],
        total=len(roles),
    )


@router.get(
    "/{role_id}",
    summary="Get role",
    responses={
        200: {"description": "Role details"},
        404: {"description": "Role not found"},
    },
)
async def get_role(role_id: int, factory: RepoFactory) -> RoleResponse:
    role = await RoleService.from_factory(factory).get_role(role_id)
    if role is None:
        raise RoleNotFoundError(role_id)
    return role_to_response(role)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create role",
    responses={
        201: {"description": "Role created"},
        400: {"description": "Role name or guid already exists"},
    },
)
async def create_role(request: RoleCreateRequest, factory: RepoFactory) -> RoleResponse:
    """
    Create a new role.

    Names are unique and compared case-sensitively. An explicit guid must
    not belong to another role.
    """
    service = RoleService.from_factory(factory)

    try:
        role = await service.create_role(Role.create(request.name, guid=request.guid))
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    logger.info("Role created: %s (%s)", role.name, role.id)
    return role_to_response(role)


@router.put(
    "",
    summary="Update role",
    responses={
        200: {"description": "Role updated"},
        400: {"description": "Another role already has this name"},
        404: {"description": "Role not found"},
    },
)
async def update_role(request: RoleUpdateRequest, factory: RepoFactory) -> RoleResponse:
    """Rename an existing role. Only the name is applied."""
    service = RoleService.from_factory(factory)

    try:
        role = await service.update_role(Role(name=request.name, id=request.id))
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return role_to_response(role)
