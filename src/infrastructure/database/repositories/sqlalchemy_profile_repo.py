"""SQLAlchemy implementation of Profile repository."""

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import (
    AppException,
    ConcurrentModificationError,
    HandleTakenError,
    ProfileAlreadyExistsError,
)
from domain.entities.profile import Education, Experience, Profile, SocialLinks
from infrastructure.database.models import ProfileModel


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value else None


def _parse_date(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _experience_to_doc(record: Experience) -> dict[str, Any]:
    return {
        "id": str(record.id),
        "title": record.title,
        "company": record.company,
        "location": record.location,
        "from": _iso(record.from_date),
        "to": _iso(record.to_date),
        "current": record.current,
        "description": record.description,
    }


def _experience_from_doc(doc: dict[str, Any]) -> Experience:
    return Experience(
        id=UUID(doc["id"]),
        title=doc["title"],
        company=doc["company"],
        location=doc.get("location"),
        from_date=_parse_date(doc["from"]),  # type: ignore[arg-type]
        to_date=_parse_date(doc.get("to")),
        current=bool(doc.get("current", False)),
        description=doc.get("description"),
    )


def _education_to_doc(record: Education) -> dict[str, Any]:
    return {
        "id": str(record.id),
        "school": record.school,
        "degree": record.degree,
        "fieldofstudy": record.fieldofstudy,
        "from": _iso(record.from_date),
        "to": _iso(record.to_date),
        "current": record.current,
        "description": record.description,
    }


def _education_from_doc(doc: dict[str, Any]) -> Education:
    return Education(
        id=UUID(doc["id"]),
        school=doc["school"],
        degree=doc["degree"],
        fieldofstudy=doc["fieldofstudy"],
        from_date=_parse_date(doc["from"]),  # type: ignore[arg-type]
        to_date=_parse_date(doc.get("to")),
        current=bool(doc.get("current", False)),
        description=doc.get("description"),
    )


def _conflict_from(exc: IntegrityError, profile: Profile) -> AppException:
    """Name the unique key a write collided with."""
    if profile.handle and "handle" in str(exc.orig):
        return HandleTakenError(profile.handle)
    return ProfileAlreadyExistsError(str(profile.user_id))


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_handle(self, handle: str) -> Profile | None:
        """Get a profile by its handle."""
        stmt = select(ProfileModel).where(ProfileModel.handle == handle)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[Profile]:
        """Get every profile in store order."""
        result = await self._session.execute(select(ProfileModel))
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, profile: Profile) -> Profile:
        """Insert a profile; unique keys on user and handle reject duplicates."""
        model = self._to_model(profile)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise _conflict_from(exc, profile) from exc
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Compare-and-set write keyed on the version that was read."""
        stmt = (
            update(ProfileModel)
            .where(ProfileModel.id == profile.id, ProfileModel.version == profile.version)
            .values(**self._document(profile), version=profile.version + 1)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as exc:
            raise _conflict_from(exc, profile) from exc

        if result.rowcount != 1:  # type: ignore[attr-defined]
            raise ConcurrentModificationError("profile", str(profile.id))

        profile.version += 1
        return profile

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the user's profile; False when there was none."""
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return bool(result.rowcount)  # type: ignore[attr-defined]

    def _document(self, entity: Profile) -> dict[str, Any]:
        """Column values for every mutable field of the aggregate."""
        return {
            "handle": entity.handle,
            "company": entity.company,
            "website": entity.website,
            "location": entity.location,
            "bio": entity.bio,
            "status": entity.status,
            "githubusername": entity.githubusername,
            "skills": list(entity.skills),
            "social": entity.social.to_dict(),
            "experience": [_experience_to_doc(record) for record in entity.experience],
            "education": [_education_to_doc(record) for record in entity.education],
        }

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            handle=model.handle,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            status=model.status,
            githubusername=model.githubusername,
            skills=list(model.skills or []),
            social=SocialLinks(**(model.social or {})),
            experience=[_experience_from_doc(doc) for doc in model.experience or []],
            education=[_education_from_doc(doc) for doc in model.education or []],
            created_at=model.created_at,
            version=model.version,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            user_id=entity.user_id,
            created_at=entity.created_at,
            version=entity.version,
            **self._document(entity),
        )
