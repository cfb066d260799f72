"""Post service layer with business logic."""

from collections.abc import Mapping
from typing import Any, Callable
from uuid import UUID

import structlog

from core.exceptions import (
    AlreadyLikedError,
    CommentNotFoundError,
    NotCommentAuthorError,
    NotLikedError,
    NotPostOwnerError,
    PostNotFoundError,
    ValidationFailedError,
)
from domain.entities.post import Comment, Post
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import PayloadKind, validate

logger = structlog.get_logger()


class PostService:
    """Service layer for the Post aggregate."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> list[Post]:
        """Every post, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.list_all()

    async def get_by_id(self, post_id: UUID) -> Post:
        async with self._uow_factory() as uow:
            return await self._require_post(uow, post_id)

    async def create(self, user_id: UUID, payload: Mapping[str, Any]) -> Post:
        """Create a post owned by ``user_id`` with no likes or comments."""
        data = self._validated(payload)

        async with self._uow_factory() as uow:
            post = Post(
                user_id=user_id,
                text=data["text"],
                name=data["name"],
                avatar=data["avatar"],
            )
            created = await uow.posts.create(post)
            await uow.commit()
            logger.info("post_created", user_id=str(user_id), post_id=str(created.id))
            return created

    async def delete(self, post_id: UUID, user_id: UUID) -> Post:
        """Delete a post. Only its owner may do so; returns the deleted post."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if not post.is_owned_by(user_id):
                raise NotPostOwnerError(str(post_id))

            await uow.posts.delete(post_id)
            await uow.commit()
            logger.info("post_deleted", user_id=str(user_id), post_id=str(post_id))
            return post

    async def like(self, post_id: UUID, user_id: UUID) -> Post:
        """Add the user's like. A second like by the same user is rejected."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if post.has_liked(user_id):
                raise AlreadyLikedError(str(post_id))

            post.add_like(user_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            logger.info("post_liked", user_id=str(user_id), post_id=str(post_id))
            return updated

    async def unlike(self, post_id: UUID, user_id: UUID) -> Post:
        """Remove the user's like."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if post.remove_like(user_id) is None:
                raise NotLikedError(str(post_id))

            updated = await uow.posts.update(post)
            await uow.commit()
            logger.info("post_unliked", user_id=str(user_id), post_id=str(post_id))
            return updated

    async def add_comment(
        self, post_id: UUID, payload: Mapping[str, Any], user_id: UUID
    ) -> Post:
        """Prepend a comment authored by ``user_id``."""
        data = self._validated(payload)

        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            comment = Comment(
                user_id=user_id,
                text=data["text"],
                name=data["name"],
                avatar=data["avatar"],
            )
            post.add_comment(comment)
            updated = await uow.posts.update(post)
            await uow.commit()
            logger.info(
                "comment_added",
                user_id=str(user_id),
                post_id=str(post_id),
                comment_id=str(comment.id),
            )
            return updated

    async def remove_comment(
        self, post_id: UUID, user_id: UUID, comment_id: UUID | None = None
    ) -> Post:
        """Remove a comment written by ``user_id``.

        Without ``comment_id`` the first comment by that author (newest-first
        order) is removed, so a user with several comments on one post can
        only reach the newest one this way. Passing ``comment_id`` removes
        exactly that comment.

        Raises:
            CommentNotFoundError: no matching comment on the post
            NotCommentAuthorError: ``comment_id`` belongs to someone else
        """
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)

            if comment_id is None:
                removed = post.remove_comment_by_author(user_id)
                if removed is None:
                    raise CommentNotFoundError(str(post_id))
            else:
                target = post.find_comment(comment_id)
                if target is None:
                    raise CommentNotFoundError(str(post_id), str(comment_id))
                if target.user_id != user_id:
                    raise NotCommentAuthorError(str(comment_id))
                removed = post.remove_comment(comment_id)

            updated = await uow.posts.update(post)
            await uow.commit()
            logger.info(
                "comment_removed",
                user_id=str(user_id),
                post_id=str(post_id),
                comment_id=str(removed.id) if removed else None,
            )
            return updated

    def _validated(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        result = validate(payload, PayloadKind.POST)
        if not result.is_valid:
            raise ValidationFailedError(result.errors)
        return result.data

    async def _require_post(self, uow: IUnitOfWork, post_id: UUID) -> Post:
        post = await uow.posts.get(post_id)
        if not post:
            raise PostNotFoundError(str(post_id))
        return post
