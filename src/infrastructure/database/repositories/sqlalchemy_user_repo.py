"""SQLAlchemy implementation of the user directory."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.user import UserAccount, UserSummary
from infrastructure.database.models import UserModel


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of IUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> UserSummary | None:
        """Get a user's display fields."""
        stmt = select(UserModel).where(UserModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_summary(model) if model else None

    async def get_many(self, ids: list[UUID]) -> dict[UUID, UserSummary]:
        """Get display fields for several users in a single query."""
        if not ids:
            return {}
        stmt = select(UserModel).where(UserModel.id.in_(set(ids)))
        result = await self._session.execute(stmt)
        return {model.id: self._to_summary(model) for model in result.scalars()}

    async def save(self, account: UserAccount) -> None:
        """Insert the account or refresh its email and display fields."""
        model = await self._session.get(UserModel, account.id)
        if model is None:
            model = UserModel(id=account.id)
            self._session.add(model)
        model.email = account.email
        model.name = account.name
        model.avatar = account.avatar
        await self._session.flush()

    async def delete(self, id: UUID) -> bool:
        """Delete a user account; False when there was none."""
        stmt = delete(UserModel).where(UserModel.id == id)
        result = await self._session.execute(stmt)
        return bool(result.rowcount)  # type: ignore[attr-defined]

    def _to_summary(self, model: UserModel) -> UserSummary:
        return UserSummary(id=model.id, name=model.name, avatar=model.avatar)
