"""Field contracts for incoming payloads.

``validate(payload, kind)`` never touches the store and never raises for bad
input: it returns a verdict plus a field -> message map. Messages are keyed by
the payload field name (``from``, not ``from_date``). On success ``data``
holds the normalized values that were actually submitted.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Any

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

HANDLE_MIN_LENGTH = 2
HANDLE_MAX_LENGTH = 40
POST_TEXT_MIN_LENGTH = 2
POST_TEXT_MAX_LENGTH = 300

_URL = TypeAdapter(AnyHttpUrl)
_DATE = TypeAdapter(date)
_BOOL = TypeAdapter(bool)


class PayloadKind(StrEnum):
    """Payload shapes the validation layer knows about."""

    PROFILE = "profile"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    POST = "post"

    @classmethod
    def _missing_(cls, value: object) -> "PayloadKind | None":
        # Legacy clients still send the misspelled kind.
        if value == "expirience":
            return cls.EXPERIENCE
        return None


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Verdict for one payload."""

    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)


def _text(value: Any, label: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PydanticCustomError("text_type", "{label} must be text", {"label": label})
    return value


def _required(value: Any, label: str) -> str:
    text = _text(value, label)
    if not text.strip():
        raise PydanticCustomError("required", "{label} field is required", {"label": label})
    return text


def _optional(value: Any, label: str) -> str | None:
    return _text(value, label) or None


def _url(value: Any, label: str) -> str | None:
    text = _optional(value, label)
    if text is None:
        return None
    candidate = text if "://" in text else f"http://{text}"
    try:
        url = _URL.validate_python(candidate)
    except ValidationError:
        raise PydanticCustomError("url", "Not a valid URL") from None
    if not url.host or "." not in url.host:
        raise PydanticCustomError("url", "Not a valid URL")
    return text


def _date(value: Any, label: str, required: bool = False) -> date | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        if required:
            raise PydanticCustomError("required", "{label} field is required", {"label": label})
        return None
    if isinstance(value, datetime):
        return value.date()
    try:
        return _DATE.validate_python(value)
    except ValidationError:
        raise PydanticCustomError(
            "date", "{label} is not a valid date", {"label": label}
        ) from None


def _flag(value: Any, label: str) -> bool:
    if value is None or value == "":
        return False
    try:
        return _BOOL.validate_python(value)
    except ValidationError:
        raise PydanticCustomError(
            "bool", "{label} must be true or false", {"label": label}
        ) from None


class _Contract(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ProfileContract(_Contract):
    handle: str | None = Field(default=None, validate_default=True)
    status: str = Field(default="", validate_default=True)
    skills: str = Field(default="", validate_default=True)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    @field_validator("handle", mode="before")
    @classmethod
    def _check_handle(cls, value: Any) -> str | None:
        text = _optional(value, "Handle")
        if text is not None and not HANDLE_MIN_LENGTH <= len(text) <= HANDLE_MAX_LENGTH:
            raise PydanticCustomError(
                "length",
                "Handle needs to be between {min} and {max} characters",
                {"min": HANDLE_MIN_LENGTH, "max": HANDLE_MAX_LENGTH},
            )
        return text

    @field_validator("status", mode="before")
    @classmethod
    def _check_status(cls, value: Any) -> str:
        return _required(value, "Status")

    @field_validator("skills", mode="before")
    @classmethod
    def _check_skills(cls, value: Any) -> str:
        return _required(value, "Skills")

    @field_validator("company", "location", "bio", "githubusername", mode="before")
    @classmethod
    def _check_text(cls, value: Any, info: ValidationInfo) -> str | None:
        return _optional(value, info.field_name.capitalize())

    @field_validator(
        "website", "youtube", "twitter", "facebook", "linkedin", "instagram", mode="before"
    )
    @classmethod
    def _check_url(cls, value: Any, info: ValidationInfo) -> str | None:
        return _url(value, info.field_name.capitalize())


class _DatedRecordContract(_Contract):
    from_date: date | None = Field(default=None, alias="from", validate_default=True)
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None

    @field_validator("from_date", mode="before")
    @classmethod
    def _check_from(cls, value: Any) -> date | None:
        return _date(value, "From date", required=True)

    @field_validator("to_date", mode="before")
    @classmethod
    def _check_to(cls, value: Any) -> date | None:
        return _date(value, "To date")

    @field_validator("current", mode="before")
    @classmethod
    def _check_current(cls, value: Any) -> bool:
        return _flag(value, "Current")

    @field_validator("description", mode="before")
    @classmethod
    def _check_description(cls, value: Any) -> str | None:
        return _optional(value, "Description")


class ExperienceContract(_DatedRecordContract):
    title: str = Field(default="", validate_default=True)
    company: str = Field(default="", validate_default=True)
    location: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _check_title(cls, value: Any) -> str:
        return _required(value, "Job title")

    @field_validator("company", mode="before")
    @classmethod
    def _check_company(cls, value: Any) -> str:
        return _required(value, "Company")

    @field_validator("location", mode="before")
    @classmethod
    def _check_location(cls, value: Any) -> str | None:
        return _optional(value, "Location")


class EducationContract(_DatedRecordContract):
    school: str = Field(default="", validate_default=True)
    degree: str = Field(default="", validate_default=True)
    fieldofstudy: str = Field(default="", validate_default=True)

    @field_validator("school", mode="before")
    @classmethod
    def _check_school(cls, value: Any) -> str:
        return _required(value, "School")

    @field_validator("degree", mode="before")
    @classmethod
    def _check_degree(cls, value: Any) -> str:
        return _required(value, "Degree")

    @field_validator("fieldofstudy", mode="before")
    @classmethod
    def _check_fieldofstudy(cls, value: Any) -> str:
        return _required(value, "Field of study")


class PostContract(_Contract):
    text: str = Field(default="", validate_default=True)
    name: str = Field(default="", validate_default=True)
    avatar: str = Field(default="", validate_default=True)

    @field_validator("text", mode="before")
    @classmethod
    def _check_text(cls, value: Any) -> str:
        text = _required(value, "Text")
        if not POST_TEXT_MIN_LENGTH <= len(text) <= POST_TEXT_MAX_LENGTH:
            raise PydanticCustomError(
                "length",
                "Post must be between {min} and {max} characters",
                {"min": POST_TEXT_MIN_LENGTH, "max": POST_TEXT_MAX_LENGTH},
            )
        return text

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> str:
        return _required(value, "Name")

    @field_validator("avatar", mode="before")
    @classmethod
    def _check_avatar(cls, value: Any) -> str:
        return _required(value, "Avatar")


_CONTRACTS: dict[PayloadKind, type[_Contract]] = {
    PayloadKind.PROFILE: ProfileContract,
    PayloadKind.EXPERIENCE: ExperienceContract,
    PayloadKind.EDUCATION: EducationContract,
    PayloadKind.POST: PostContract,
}


def _payload_key(contract: type[_Contract], loc: tuple[int | str, ...]) -> str:
    """Name a failing field the way the caller submitted it.

    Defaults that fail validation are reported under the attribute name, so
    aliased fields are mapped back here.
    """
    if not loc:
        return "payload"
    name = str(loc[0])
    field_info = contract.model_fields.get(name)
    if field_info is not None and field_info.alias:
        return field_info.alias
    return name


def validate(payload: Any, kind: PayloadKind | str) -> ValidationResult:
    """Check ``payload`` against the field contract for ``kind``.

    Args:
        payload: Parsed request body
        kind: One of the PayloadKind values (``"expirience"`` is accepted)

    Returns:
        ValidationResult with one message per failing field

    Raises:
        ValueError: ``kind`` is not a known payload kind
    """
    contract = _CONTRACTS[PayloadKind(kind)]
    if not isinstance(payload, Mapping):
        return ValidationResult(is_valid=False, errors={"payload": "Payload must be an object"})

    try:
        model = contract.model_validate(dict(payload))
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            errors.setdefault(_payload_key(contract, error["loc"]), error["msg"])
        return ValidationResult(is_valid=False, errors=errors)

    return ValidationResult(is_valid=True, data=model.model_dump(exclude_unset=True))
