"""User domain entity (owned by the identity provider, referenced here)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class UserSummary:
    """Read-only display fields joined onto profiles."""

    id: UUID
    name: str | None
    avatar: str | None


@dataclass(frozen=True, slots=True)
class UserAccount:
    """Identity claims of an authenticated caller, as recorded in the directory."""

    id: UUID
    email: str
    name: str | None = None
    avatar: str | None = None
