"""Post API routes."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_post_service
from api.v1.schemas.post import PostDetailResponse, PostListResponse, PostResponse
from domain.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])

Payload = Annotated[dict[str, Any], Body()]


@router.get(
    "",
    response_model=PostListResponse,
    summary="List all posts",
)
async def list_posts(
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostListResponse:
    """Get every post, newest first."""
    posts = await service.list_all()
    return PostListResponse(data=[PostResponse.from_entity(post) for post in posts])


@router.get(
    "/{post_id}",
    response_model=PostDetailResponse,
    summary="Get a post",
    responses={404: {"description": "Post not found"}},
)
async def get_post(
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Get a single post by ID."""
    post = await service.get_by_id(post_id)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.post(
    "",
    response_model=PostDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
    responses={400: {"description": "Validation failed"}},
)
async def create_post(
    body: Payload,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Create a post owned by the authenticated user."""
    post = await service.create(user.id, body)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.delete(
    "/{post_id}",
    response_model=PostDetailResponse,
    summary="Delete a post",
    responses={
        403: {"description": "Not the post owner"},
        404: {"description": "Post not found"},
    },
)
async def delete_post(
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Delete a post. Returns the deleted post."""
    post = await service.delete(post_id, user.id)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.post(
    "/like/{post_id}",
    response_model=PostDetailResponse,
    summary="Like a post",
    responses={
        404: {"description": "Post not found"},
        409: {"description": "Already liked"},
    },
)
async def like_post(
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Like a post once."""
    post = await service.like(post_id, user.id)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.post(
    "/unlike/{post_id}",
    response_model=PostDetailResponse,
    summary="Unlike a post",
    responses={
        404: {"description": "Post not found"},
        409: {"description": "Not liked yet"},
    },
)
async def unlike_post(
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Withdraw a like."""
    post = await service.unlike(post_id, user.id)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.post(
    "/comment/{post_id}",
    response_model=PostDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a post",
    responses={
        400: {"description": "Validation failed"},
        404: {"description": "Post not found"},
    },
)
async def add_comment(
    post_id: UUID,
    body: Payload,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Add a comment at the top of the post's comment list."""
    post = await service.add_comment(post_id, body, user.id)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.delete(
    "/comment/{post_id}",
    response_model=PostDetailResponse,
    summary="Remove own comment",
    responses={
        404: {"description": "Post not found"},
        409: {"description": "Comment does not exist"},
    },
)
async def remove_own_comment(
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Remove the caller's most recent comment on the post."""
    post = await service.remove_comment(post_id, user.id)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=PostDetailResponse,
    summary="Remove a specific comment",
    responses={
        403: {"description": "Not the comment author"},
        404: {"description": "Post not found"},
        409: {"description": "Comment does not exist"},
    },
)
async def remove_comment(
    post_id: UUID,
    comment_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Remove one comment by ID. Only its author may do so."""
    post = await service.remove_comment(post_id, user.id, comment_id=comment_id)
    return PostDetailResponse(data=PostResponse.from_entity(post))
