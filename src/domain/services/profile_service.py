"""Profile service layer with business logic."""

from collections.abc import Mapping
from typing import Any, Callable
from uuid import UUID

import structlog

from core.exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    HandleTakenError,
    ProfileNotFoundError,
    ValidationFailedError,
)
from domain.entities.profile import (
    Education,
    Experience,
    Profile,
    ProfilePatch,
    ProfileWithUser,
)
from domain.entities.user import UserAccount
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import PayloadKind, validate

logger = structlog.get_logger()


def _validated(payload: Mapping[str, Any], kind: PayloadKind) -> dict[str, Any]:
    result = validate(payload, kind)
    if not result.is_valid:
        raise ValidationFailedError(result.errors)
    return result.data


class ProfileService:
    """Service layer for the Profile aggregate."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_own(self, user_id: UUID) -> ProfileWithUser:
        """Get the authenticated user's profile joined with their display fields."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError()
            return ProfileWithUser(profile=profile, user=await uow.users.get(user_id))

    async def get_by_handle(self, handle: str) -> ProfileWithUser:
        """Public lookup by handle."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_handle(handle)
            if not profile:
                raise ProfileNotFoundError(handle)
            return ProfileWithUser(profile=profile, user=await uow.users.get(profile.user_id))

    async def get_by_user_id(self, target_user_id: UUID) -> ProfileWithUser:
        """Public lookup by owning user."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(target_user_id)
            if not profile:
                raise ProfileNotFoundError(str(target_user_id))
            return ProfileWithUser(profile=profile, user=await uow.users.get(target_user_id))

    async def list_all(self) -> list[ProfileWithUser]:
        """Every profile with its owner's display fields (batch join)."""
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.list_all()
            users = await uow.users.get_many([profile.user_id for profile in profiles])
            return [
                ProfileWithUser(profile=profile, user=users.get(profile.user_id))
                for profile in profiles
            ]

    async def upsert(
        self,
        user_id: UUID,
        payload: Mapping[str, Any],
        account: UserAccount | None = None,
    ) -> Profile:
        """Create the user's profile, or apply the submitted fields to it.

        Only submitted fields are written; on creation absent fields are
        omitted rather than defaulted. When ``account`` is given, the caller's
        directory entry is written in the same unit of work.

        Raises:
            ValidationFailedError: payload failed the profile contract
            HandleTakenError: creating with a handle another profile owns
        """
        patch = ProfilePatch.from_payload(_validated(payload, PayloadKind.PROFILE))

        async with self._uow_factory() as uow:
            if account is not None:
                await uow.users.save(account)
            existing = await uow.profiles.get_by_user(user_id)
            if existing:
                patch.apply_to(existing)
                updated = await uow.profiles.update(existing)
                await uow.commit()
                logger.info(
                    "profile_updated",
                    user_id=str(user_id),
                    fields=sorted(patch.set_fields()),
                )
                return updated

            if patch.handle and await uow.profiles.get_by_handle(patch.handle):
                raise HandleTakenError(patch.handle)

            created = await uow.profiles.create(patch.build(user_id))
            await uow.commit()
            logger.info("profile_created", user_id=str(user_id), profile_id=str(created.id))
            return created

    async def add_experience(self, user_id: UUID, payload: Mapping[str, Any]) -> Profile:
        """Prepend an experience entry to the user's profile."""
        record = Experience(**_validated(payload, PayloadKind.EXPERIENCE))

        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_experience(record)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            logger.info("experience_added", user_id=str(user_id), experience_id=str(record.id))
            return updated

    async def add_education(self, user_id: UUID, payload: Mapping[str, Any]) -> Profile:
        """Prepend an education entry to the user's profile."""
        record = Education(**_validated(payload, PayloadKind.EDUCATION))

        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_education(record)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            logger.info("education_added", user_id=str(user_id), education_id=str(record.id))
            return updated

    async def remove_experience(self, user_id: UUID, experience_id: UUID) -> Profile:
        """Remove an experience entry from the user's own profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            if profile.remove_experience(experience_id) is None:
                raise ExperienceNotFoundError(str(experience_id))
            updated = await uow.profiles.update(profile)
            await uow.commit()
            logger.info(
                "experience_removed", user_id=str(user_id), experience_id=str(experience_id)
            )
            return updated

    async def remove_education(self, user_id: UUID, education_id: UUID) -> Profile:
        """Remove an education entry from the user's own profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            if profile.remove_education(education_id) is None:
                raise EducationNotFoundError(str(education_id))
            updated = await uow.profiles.update(profile)
            await uow.commit()
            logger.info(
                "education_removed", user_id=str(user_id), education_id=str(education_id)
            )
            return updated

    async def delete_own(self, user_id: UUID) -> bool:
        """Delete the user's profile and then the user account.

        Both deletes are unconditional, so repeating the call succeeds.
        """
        async with self._uow_factory() as uow:
            had_profile = await uow.profiles.delete_by_user(user_id)
            had_user = await uow.users.delete(user_id)
            await uow.commit()
            logger.info(
                "account_deleted",
                user_id=str(user_id),
                had_profile=had_profile,
                had_user=had_user,
            )
            return True

    async def _require_profile(self, uow: IUnitOfWork, user_id: UUID) -> Profile:
        profile = await uow.profiles.get_by_user(user_id)
        if not profile:
            raise ProfileNotFoundError()
        return profile
