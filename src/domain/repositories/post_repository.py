"""Post repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.post import Post


class IPostRepository(Protocol):
    """Repository interface for the Posts collection."""

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID."""
        ...

    async def list_all(self) -> list[Post]:
        """Get every post, newest first."""
        ...

    async def create(self, post: Post) -> Post:
        """Insert a post."""
        ...

    async def update(self, post: Post) -> Post:
        """Write the post back if its version is unchanged since it was read.

        Raises:
            ConcurrentModificationError: the stored version moved on
        """
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a post and return success status."""
        ...
