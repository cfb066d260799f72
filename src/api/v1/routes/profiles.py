"""Profile API routes."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service
from api.v1.schemas.profile import (
    DeleteAccountResponse,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
)
from domain.entities.user import UserAccount
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profiles"])

Payload = Annotated[dict[str, Any], Body()]


@router.get(
    "",
    response_model=ProfileDetailResponse,
    summary="Get own profile",
    responses={404: {"description": "User has no profile"}},
)
async def get_own_profile(
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the authenticated user's profile with name and avatar."""
    joined = await service.get_own(user.id)
    return ProfileDetailResponse(data=ProfileResponse.from_joined(joined))


@router.post(
    "",
    response_model=ProfileDetailResponse,
    summary="Create or update own profile",
    responses={
        400: {"description": "Validation failed"},
        409: {"description": "Handle already exists"},
    },
)
async def upsert_profile(
    body: Payload,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Create the profile, or update only the submitted fields.

    ``skills`` is a comma-separated string.
    """
    account = UserAccount(id=user.id, email=user.email, name=user.name, avatar=user.avatar)
    profile = await service.upsert(user.id, body, account=account)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.delete(
    "",
    response_model=DeleteAccountResponse,
    summary="Delete own profile and account",
)
async def delete_own_account(
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> DeleteAccountResponse:
    """Delete the profile and the user account. Safe to repeat."""
    return DeleteAccountResponse(success=await service.delete_own(user.id))


@router.get(
    "/all",
    response_model=ProfileListResponse,
    summary="List all profiles",
)
async def list_profiles(
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Public: every profile with owner name and avatar."""
    profiles = await service.list_all()
    return ProfileListResponse(data=[ProfileResponse.from_joined(item) for item in profiles])


@router.get(
    "/handle/{handle}",
    response_model=ProfileDetailResponse,
    summary="Get profile by handle",
    responses={404: {"description": "Profile not found"}},
)
async def get_profile_by_handle(
    handle: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Public lookup by handle."""
    joined = await service.get_by_handle(handle)
    return ProfileDetailResponse(data=ProfileResponse.from_joined(joined))


@router.get(
    "/user/{user_id}",
    response_model=ProfileDetailResponse,
    summary="Get profile by user ID",
    responses={404: {"description": "Profile not found"}},
)
async def get_profile_by_user(
    user_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Public lookup by owning user."""
    joined = await service.get_by_user_id(user_id)
    return ProfileDetailResponse(data=ProfileResponse.from_joined(joined))


@router.post(
    "/experience",
    response_model=ProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add experience",
    responses={
        400: {"description": "Validation failed"},
        404: {"description": "User has no profile"},
    },
)
async def add_experience(
    body: Payload,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an experience entry at the top of the list."""
    profile = await service.add_experience(user.id, body)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.delete(
    "/experience/{experience_id}",
    response_model=ProfileDetailResponse,
    summary="Remove experience",
    responses={404: {"description": "Profile or experience not found"}},
)
async def remove_experience(
    experience_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an experience entry from the user's own profile."""
    profile = await service.remove_experience(user.id, experience_id)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.post(
    "/education",
    response_model=ProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add education",
    responses={
        400: {"description": "Validation failed"},
        404: {"description": "User has no profile"},
    },
)
async def add_education(
    body: Payload,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an education entry at the top of the list."""
    profile = await service.add_education(user.id, body)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.delete(
    "/education/{education_id}",
    response_model=ProfileDetailResponse,
    summary="Remove education",
    responses={404: {"description": "Profile or education not found"}},
)
async def remove_education(
    education_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an education entry from the user's own profile."""
    profile = await service.remove_education(user.id, education_id)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))
