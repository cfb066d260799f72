"""Post aggregate: the post document with its likes and comments."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from domain.entities.embedded import index_of, pop_first


@dataclass
class Like:
    """Embedded like; at most one per user on a post."""

    user_id: UUID
    id: UUID = field(default_factory=uuid4)


@dataclass
class Comment:
    """Embedded comment."""

    user_id: UUID
    text: str
    name: str | None = None
    avatar: str | None = None
    id: UUID = field(default_factory=uuid4)
    date: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a post. ``user_id`` is fixed at creation."""

    user_id: UUID
    text: str
    name: str | None = None
    avatar: str | None = None
    id: UUID = field(default_factory=uuid4)
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    date: datetime = field(default_factory=datetime.utcnow)
    version: int = 0

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    def has_liked(self, user_id: UUID) -> bool:
        return index_of(self.likes, lambda like: like.user_id == user_id) is not None

    def add_like(self, user_id: UUID) -> Like:
        like = Like(user_id=user_id)
        self.likes.insert(0, like)
        return like

    def remove_like(self, user_id: UUID) -> Like | None:
        return pop_first(self.likes, lambda like: like.user_id == user_id)

    def add_comment(self, comment: Comment) -> None:
        """Newest first."""
        self.comments.insert(0, comment)

    def find_comment(self, comment_id: UUID) -> Comment | None:
        index = index_of(self.comments, lambda comment: comment.id == comment_id)
        return self.comments[index] if index is not None else None

    def remove_comment(self, comment_id: UUID) -> Comment | None:
        return pop_first(self.comments, lambda comment: comment.id == comment_id)

    def remove_comment_by_author(self, user_id: UUID) -> Comment | None:
        """Remove the first comment written by ``user_id`` in list order."""
        return pop_first(self.comments, lambda comment: comment.user_id == user_id)
