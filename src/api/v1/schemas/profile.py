"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from domain.entities.profile import Profile, ProfileWithUser
from domain.entities.user import UserSummary


class UserSummaryResponse(BaseModel):
    """Owner display fields joined onto a profile."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str | None = None
    avatar: str | None = None


class SocialResponse(BaseModel):
    """Schema for social links."""

    model_config = ConfigDict(from_attributes=True)

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ExperienceResponse(BaseModel):
    """Schema for an experience entry."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    company: str
    location: str | None = None
    from_date: date = Field(
        validation_alias=AliasChoices("from_date", "from"), serialization_alias="from"
    )
    to_date: date | None = Field(
        default=None,
        validation_alias=AliasChoices("to_date", "to"),
        serialization_alias="to",
    )
    current: bool = False
    description: str | None = None


class EducationResponse(BaseModel):
    """Schema for an education entry."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(
        validation_alias=AliasChoices("from_date", "from"), serialization_alias="from"
    )
    to_date: date | None = Field(
        default=None,
        validation_alias=AliasChoices("to_date", "to"),
        serialization_alias="to",
    )
    current: bool = False
    description: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response.

    ``user`` is only filled on reads, where the owner's display fields are
    joined from the user directory.
    """

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "handle": "ada",
                "status": "Developer",
                "skills": ["go", "rust"],
                "social": {"twitter": "https://twitter.com/ada"},
                "experience": [],
                "education": [],
                "created_at": "2026-01-28T10:00:00",
                "user": {"id": "123e4567-e89b-12d3-a456-426614174000", "name": "Ada"},
            }
        },
    )

    id: UUID
    user_id: UUID
    handle: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    githubusername: str | None = None
    skills: list[str] = []
    social: SocialResponse
    experience: list[ExperienceResponse] = []
    education: list[EducationResponse] = []
    created_at: datetime
    user: UserSummaryResponse | None = None

    @classmethod
    def from_entity(
        cls, profile: Profile, user: UserSummary | None = None
    ) -> "ProfileResponse":
        response = cls.model_validate(profile)
        if user is not None:
            response.user = UserSummaryResponse.model_validate(user)
        return response

    @classmethod
    def from_joined(cls, joined: ProfileWithUser) -> "ProfileResponse":
        return cls.from_entity(joined.profile, joined.user)


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class DeleteAccountResponse(BaseModel):
    """Acknowledgment for account deletion."""

    success: bool
