"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest


def _echo(entity: Any) -> Any:
    return entity


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing.

    ``update`` and ``create`` hand back what they were given, like the
    real repositories do.
    """

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.posts = AsyncMock()
        self.users = AsyncMock()
        self.profiles.create.side_effect = _echo
        self.profiles.update.side_effect = _echo
        self.posts.create.side_effect = _echo
        self.posts.update.side_effect = _echo
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()


@pytest.fixture
def other_user_id() -> UUID:
    """A random user ID distinct from user_id."""
    return uuid4()
