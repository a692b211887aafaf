"""User profiles router for profile management endpoints."""

import logging

from fastapi import APIRouter, status

from usermgmt.application.services import UserProfileService
from usermgmt.domain.profile import UserProfile
from usermgmt.presentation.api.dependencies import RepoFactory
from usermgmt.presentation.api.routers.roles import role_to_response
from usermgmt.presentation.api.schemas.profiles import (
    UserProfileCreateRequest,
    UserProfileListResponse,
    UserProfileResponse,
    UserProfileUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(profile: UserProfile) -> UserProfileResponse:
    return UserProfileResponse(
        id=profile.id,
        guid=profile.guid,
        name=profile.name,
        email=profile.email,
        bio=profile.bio,
        role_id=profile.role_id,
        receive_newsletter=profile.receive_newsletter,
        created_on=profile.created_on,
        updated_on=profile.updated_on,
        role=role_to_response(profile.role) if profile.role else None,
    )


@router.get(
    "",
    summary="List user profiles",
    responses={
        200: {"description": "List of user profiles with their roles"},
    },
)
async def list_profiles(factory: RepoFactory) -> UserProfileListResponse:
    profiles = await UserProfileService.from_factory(factory).list_profiles()
    return UserProfileListResponse(
        profiles=[_to_response(profile) for profile in profiles],
        total=len(profiles),
    )


@router.get(
    "/{profile_id}",
    summary="Get user profile",
    responses={
        200: {"description": "User profile with its role"},
        404: {"description": "User profile not found"},
    },
)
async def get_profile(profile_id: int, factory: RepoFactory) -> UserProfileResponse:
    profile = await UserProfileService.from_factory(factory).get_profile(profile_id)
    return _to_response(profile)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create user profile",
    responses={
        201: {"description": "User profile created"},
        400: {"description": "Role missing, or email, id or guid already in use"},
    },
)
async def create_profile(
    request: UserProfileCreateRequest,
    factory: RepoFactory,
) -> UserProfileResponse:
    """
    Create a new user profile.

    The referenced role must exist. The response carries ``role_id`` only;
    fetch the profile to get the embedded role.
    """
    service = UserProfileService.from_factory(factory)

    try:
        profile = await service.create_profile(
            UserProfile(
                name=request.name,
                email=request.email,
                role_id=request.role_id,
                bio=request.bio,
                receive_newsletter=request.receive_newsletter,
                id=request.id,
                guid=request.guid,
            ),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    logger.info("User profile created: %s", profile.id)
    return _to_response(profile)


@router.put(
    "",
    summary="Update user profile",
    responses={
        200: {"description": "User profile updated"},
        400: {"description": "Role missing, or email used by another profile"},
        404: {"description": "User profile not found"},
    },
)
async def update_profile(
    request: UserProfileUpdateRequest,
    factory: RepoFactory,
) -> UserProfileResponse:
    service = UserProfileService.from_factory(factory)

    try:
        profile = await service.update_profile(
            UserProfile(
                name=request.name,
                email=request.email,
                role_id=request.role_id,
                bio=request.bio,
                receive_newsletter=request.receive_newsletter,
                id=request.id,
            ),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return _to_response(profile)
