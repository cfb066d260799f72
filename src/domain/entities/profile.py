"""Profile aggregate: the profile document and its embedded records."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Any
from uuid import UUID, uuid4

from domain.entities.embedded import pop_first
from domain.entities.user import UserSummary

PROFILE_SCALAR_FIELDS = (
    "handle",
    "company",
    "website",
    "location",
    "bio",
    "status",
    "githubusername",
)
SOCIAL_FIELDS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def split_skills(raw: str) -> list[str]:
    """Split a comma-delimited skills string, keeping every element as typed."""
    return raw.split(",")


@dataclass
class SocialLinks:
    """Fixed set of optional social URLs."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def merge(self, links: Mapping[str, str]) -> None:
        """Overwrite only the networks present in ``links``."""
        for name in SOCIAL_FIELDS:
            if name in links:
                setattr(self, name, links[name])

    def to_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}


@dataclass
class Experience:
    """Embedded work-history record."""

    title: str
    company: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Education:
    """Embedded education record."""

    school: str
    degree: str
    fieldofstudy: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Profile:
    """Domain entity for a user's public profile (one per user)."""

    user_id: UUID
    id: UUID = field(default_factory=uuid4)
    handle: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    githubusername: str | None = None
    skills: list[str] = field(default_factory=list)
    social: SocialLinks = field(default_factory=SocialLinks)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    version: int = 0

    def add_experience(self, record: Experience) -> None:
        """Newest first."""
        self.experience.insert(0, record)

    def add_education(self, record: Education) -> None:
        """Newest first."""
        self.education.insert(0, record)

    def remove_experience(self, experience_id: UUID) -> Experience | None:
        return pop_first(self.experience, lambda item: item.id == experience_id)

    def remove_education(self, education_id: UUID) -> Education | None:
        return pop_first(self.education, lambda item: item.id == education_id)


@dataclass
class ProfilePatch:
    """Partial profile input: unset fields are never written.

    Scalars count as set when non-empty. ``skills`` counts as set whenever the
    key was submitted. Social networks are tracked individually so that an
    update never clears links the caller did not mention.
    """

    handle: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    githubusername: str | None = None
    skills: list[str] | None = None
    social: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ProfilePatch":
        scalars = {name: payload[name] for name in PROFILE_SCALAR_FIELDS if payload.get(name)}
        skills = payload.get("skills")
        return cls(
            **scalars,
            skills=split_skills(skills) if skills is not None else None,
            social={name: payload[name] for name in SOCIAL_FIELDS if payload.get(name)},
        )

    def set_fields(self) -> dict[str, Any]:
        """The scalar fields this patch writes."""
        return {
            name: getattr(self, name)
            for name in PROFILE_SCALAR_FIELDS
            if getattr(self, name) is not None
        }

    def apply_to(self, profile: Profile) -> None:
        for name, value in self.set_fields().items():
            setattr(profile, name, value)
        if self.skills is not None:
            profile.skills = list(self.skills)
        profile.social.merge(self.social)

    def build(self, user_id: UUID) -> Profile:
        profile = Profile(user_id=user_id)
        self.apply_to(profile)
        return profile


@dataclass(frozen=True, slots=True)
class ProfileWithUser:
    """Read-only value object: a Profile joined with its owner's display fields."""

    profile: Profile
    user: UserSummary | None
