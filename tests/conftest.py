"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from uuid import UUID, uuid4

# Tables are created per test below, not by the app lifespan
os.environ["AUTO_CREATE_SCHEMA"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt as jose_jwt
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import Base, UserModel

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_SECRET = "test-secret-key"

ClientFactory = Callable[[TokenUser | None], Awaitable[AsyncClient]]


def make_token(user: TokenUser, secret: str = TEST_SECRET, **claims: object) -> str:
    """Sign an HS256 token carrying the user's identity."""
    payload: dict[str, object] = {
        "sub": str(user.id),
        "email": user.email,
        "user_metadata": {"name": user.name, "avatar_url": user.avatar},
        "exp": 9999999999,
    }
    payload.update(claims)
    return jose_jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database per test; StaticPool keeps one connection alive."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def ada() -> TokenUser:
    return TokenUser(
        id=uuid4(),
        email="ada@example.com",
        name="Ada Lovelace",
        avatar="https://avatars.example.com/ada.png",
    )


@pytest.fixture
def grace() -> TokenUser:
    return TokenUser(
        id=uuid4(),
        email="grace@example.com",
        name="Grace Hopper",
        avatar="https://avatars.example.com/grace.png",
    )


@pytest.fixture
async def users(
    session_factory: async_sessionmaker[AsyncSession], ada: TokenUser, grace: TokenUser
) -> dict[str, TokenUser]:
    """Seed the user directory with both test users."""
    async with session_factory() as session:
        for user in (ada, grace):
            session.add(
                UserModel(id=user.id, email=user.email, name=user.name, avatar=user.avatar)
            )
        await session.commit()
    return {"ada": ada, "grace": grace}


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth, no database overrides)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def client_for(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[ClientFactory, None]:
    """
    Build test clients bound to the in-memory database.

    ``await client_for(user)`` returns a client authenticated as ``user``;
    ``await client_for(None)`` returns an anonymous one that goes through
    the real bearer-token check.
    """
    from api.dependencies.auth import get_current_user
    from api.v1.dependencies import get_post_service, get_profile_service
    from domain.services.post_service import PostService
    from domain.services.profile_service import ProfileService
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    clients: list[AsyncClient] = []

    async def build(user: TokenUser | None) -> AsyncClient:
        app = create_app()
        app.dependency_overrides[get_profile_service] = lambda: ProfileService(test_uow_factory)
        app.dependency_overrides[get_post_service] = lambda: PostService(test_uow_factory)
        if user is not None:

            async def override_get_user() -> TokenUser:
                return user

            app.dependency_overrides[get_current_user] = override_get_user

        c = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(c)
        return c

    yield build

    for c in clients:
        await c.aclose()


@pytest.fixture
def missing_id() -> UUID:
    """An ID that matches nothing in the store."""
    return uuid4()
