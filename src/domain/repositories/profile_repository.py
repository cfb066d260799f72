"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for the Profiles collection."""

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        ...

    async def get_by_handle(self, handle: str) -> Profile | None:
        """Get a profile by its handle."""
        ...

    async def list_all(self) -> list[Profile]:
        """Get every profile in store order."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Insert a profile.

        Raises:
            HandleTakenError: another profile owns the handle
            ProfileAlreadyExistsError: the user already has a profile
        """
        ...

    async def update(self, profile: Profile) -> Profile:
        """Write the profile back if its version is unchanged since it was read.

        Raises:
            ConcurrentModificationError: the stored version moved on
            HandleTakenError: the new handle belongs to another profile
        """
        ...

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the user's profile; False when there was none."""
        ...
