"""Authentication provider protocol."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


@dataclass
class TokenUser:
    """Represents a user extracted from an auth token."""

    id: UUID
    email: str
    name: Optional[str] = None
    avatar: Optional[str] = None


class IAuthProvider(Protocol):
    """Protocol for authentication providers.

    Credentials are issued elsewhere; providers only verify them.
    """

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate an authentication token.

        Args:
            token: The bearer token to validate

        Returns:
            TokenUser if valid, None if invalid
        """
        ...
