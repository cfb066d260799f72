"""SQLAlchemy implementation of Post repository."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ConcurrentModificationError
from domain.entities.post import Comment, Like, Post
from infrastructure.database.models import PostModel


def _like_to_doc(like: Like) -> dict[str, Any]:
    return {"id": str(like.id), "user": str(like.user_id)}


def _like_from_doc(doc: dict[str, Any]) -> Like:
    return Like(id=UUID(doc["id"]), user_id=UUID(doc["user"]))


def _comment_to_doc(comment: Comment) -> dict[str, Any]:
    return {
        "id": str(comment.id),
        "user": str(comment.user_id),
        "text": comment.text,
        "name": comment.name,
        "avatar": comment.avatar,
        "date": comment.date.isoformat(),
    }


def _comment_from_doc(doc: dict[str, Any]) -> Comment:
    return Comment(
        id=UUID(doc["id"]),
        user_id=UUID(doc["user"]),
        text=doc["text"],
        name=doc.get("name"),
        avatar=doc.get("avatar"),
        date=datetime.fromisoformat(doc["date"]),
    )


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID."""
        stmt = select(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[Post]:
        """Get every post, newest first."""
        stmt = select(PostModel).order_by(PostModel.date.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = self._to_model(post)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, post: Post) -> Post:
        """Compare-and-set write of the embedded lists keyed on the read version."""
        stmt = (
            update(PostModel)
            .where(PostModel.id == post.id, PostModel.version == post.version)
            .values(
                likes=[_like_to_doc(like) for like in post.likes],
                comments=[_comment_to_doc(comment) for comment in post.comments],
                version=post.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount != 1:  # type: ignore[attr-defined]
            raise ConcurrentModificationError("post", str(post.id))

        post.version += 1
        return post

    async def delete(self, id: UUID) -> bool:
        """Delete a post and return success status."""
        stmt = delete(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        return bool(result.rowcount)  # type: ignore[attr-defined]

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            likes=[_like_from_doc(doc) for doc in model.likes or []],
            comments=[_comment_from_doc(doc) for doc in model.comments or []],
            date=model.date,
            version=model.version,
        )

    def _to_model(self, entity: Post) -> PostModel:
        """Convert domain entity to ORM model."""
        return PostModel(
            id=entity.id,
            user_id=entity.user_id,
            text=entity.text,
            name=entity.name,
            avatar=entity.avatar,
            likes=[_like_to_doc(like) for like in entity.likes],
            comments=[_comment_to_doc(comment) for comment in entity.comments],
            date=entity.date,
            version=entity.version,
        )
