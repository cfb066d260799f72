"""Pydantic schemas for Post API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from domain.entities.post import Post


class LikeResponse(BaseModel):
    """Schema for a like."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID


class CommentResponse(BaseModel):
    """Schema for a comment."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    text: str
    name: str | None = None
    avatar: str | None = None
    date: datetime


class PostResponse(BaseModel):
    """Schema for Post response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "9b2e1d3c-5a4f-4e6b-8c7d-0a1b2c3d4e5f",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "text": "hello",
                "name": "Ada",
                "avatar": "a.png",
                "likes": [],
                "comments": [],
                "date": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user_id: UUID
    text: str
    name: str | None = None
    avatar: str | None = None
    likes: list[LikeResponse] = []
    comments: list[CommentResponse] = []
    date: datetime

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponse":
        return cls.model_validate(post)


class PostDetailResponse(BaseModel):
    """Schema for single Post."""

    data: PostResponse


class PostListResponse(BaseModel):
    """Schema for list of Posts."""

    data: list[PostResponse]
