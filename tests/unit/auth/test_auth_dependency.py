"""Unit tests for authentication dependencies."""

from uuid import uuid4

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt as jose_jwt

from api.dependencies.auth import get_current_user
from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser


@pytest.fixture
def mock_auth_provider() -> JWTAuthProvider:
    return JWTAuthProvider(secret_key="test-secret", algorithm="HS256")


@pytest.fixture
def test_token_user() -> TokenUser:
    return TokenUser(id=uuid4(), email="test@example.com", name="Test User")


def _sign(user: TokenUser, exp: int = 9999999999, secret: str = "test-secret") -> str:
    return jose_jwt.encode(
        {"sub": str(user.id), "email": user.email, "name": user.name, "exp": exp},
        secret,
        algorithm="HS256",
    )


# --- get_current_user ---


class TestGetCurrentUser:
    @pytest.mark.asyncio
    async def test_returns_user_with_valid_token(
        self, mock_auth_provider: JWTAuthProvider, test_token_user: TokenUser
    ):
        credentials = HTTPAuthorizationCredentials(
            scheme="Bearer", credentials=_sign(test_token_user)
        )

        result = await get_current_user(credentials, mock_auth_provider)

        assert result.email == test_token_user.email
        assert result.id == test_token_user.id
        assert result.name == "Test User"

    @pytest.mark.asyncio
    async def test_raises_when_no_credentials(self, mock_auth_provider: JWTAuthProvider):
        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(None, mock_auth_provider)

        assert exc_info.value.error_code == ErrorCode.UNAUTHORIZED
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_raises_when_invalid_token(self, mock_auth_provider: JWTAuthProvider):
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials="invalid.jwt.token")

        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(credentials, mock_auth_provider)

        assert exc_info.value.error_code == ErrorCode.INVALID_TOKEN

    @pytest.mark.asyncio
    async def test_raises_when_expired_token(
        self, mock_auth_provider: JWTAuthProvider, test_token_user: TokenUser
    ):
        credentials = HTTPAuthorizationCredentials(
            scheme="Bearer", credentials=_sign(test_token_user, exp=1)
        )

        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(credentials, mock_auth_provider)

        assert exc_info.value.error_code == ErrorCode.INVALID_TOKEN

    @pytest.mark.asyncio
    async def test_raises_when_signed_with_other_secret(
        self, mock_auth_provider: JWTAuthProvider, test_token_user: TokenUser
    ):
        credentials = HTTPAuthorizationCredentials(
            scheme="Bearer", credentials=_sign(test_token_user, secret="someone-else")
        )

        with pytest.raises(AuthenticationError):
            await get_current_user(credentials, mock_auth_provider)
