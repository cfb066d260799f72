"""User directory protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.user import UserAccount, UserSummary


class IUserRepository(Protocol):
    """Access to the user directory: lookups, upsert from token claims, removal."""

    async def get(self, id: UUID) -> UserSummary | None:
        """Get a user's display fields."""
        ...

    async def get_many(self, ids: list[UUID]) -> dict[UUID, UserSummary]:
        """Get display fields for several users in a single query."""
        ...

    async def save(self, account: UserAccount) -> None:
        """Insert the account or refresh its email and display fields."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a user account; False when there was none."""
        ...
