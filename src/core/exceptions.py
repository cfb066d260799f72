"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"
    NOT_OWNER = "NOT_OWNER"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    EXPERIENCE_NOT_FOUND = "EXPERIENCE_NOT_FOUND"
    EDUCATION_NOT_FOUND = "EDUCATION_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    HANDLE_TAKEN = "HANDLE_TAKEN"
    PROFILE_EXISTS = "PROFILE_EXISTS"
    ALREADY_LIKED = "ALREADY_LIKED"
    NOT_LIKED = "NOT_LIKED"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"
    CONCURRENT_MODIFICATION = "CONCURRENT_MODIFICATION"

    # Server errors (5xx)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class AuthorizationError(AppException):
    """Authenticated, but not allowed to touch the target."""

    def __init__(
        self,
        message: str = "Access denied",
        error_code: ErrorCode = ErrorCode.FORBIDDEN,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=403,
            details=details,
        )


class NotPostOwnerError(AuthorizationError):
    """Only the author of a post may delete it."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            message="User not authorized",
            error_code=ErrorCode.NOT_OWNER,
            details={"post_id": post_id},
        )


class NotCommentAuthorError(AuthorizationError):
    """Only the author of a comment may remove it."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(
            message="User not authorized",
            error_code=ErrorCode.NOT_OWNER,
            details={"comment_id": comment_id},
        )


class ValidationFailedError(AppException):
    """Input payload failed its field contract."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Input validation failed",
            status_code=400,
            details=errors,
        )
        self.errors = errors


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, lookup: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message="There is no profile for this user",
            status_code=404,
            details={"lookup": lookup} if lookup else None,
        )


class PostNotFoundError(AppException):
    """Post not found."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_NOT_FOUND,
            message=f"Post not found: {post_id}",
            status_code=404,
            details={"post_id": post_id},
        )


class ExperienceNotFoundError(AppException):
    """Experience entry not found on the owner's profile."""

    def __init__(self, experience_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.EXPERIENCE_NOT_FOUND,
            message=f"Experience not found: {experience_id}",
            status_code=404,
            details={"experience_id": experience_id},
        )


class EducationNotFoundError(AppException):
    """Education entry not found on the owner's profile."""

    def __init__(self, education_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.EDUCATION_NOT_FOUND,
            message=f"Education not found: {education_id}",
            status_code=404,
            details={"education_id": education_id},
        )


class HandleTakenError(AppException):
    """Profile handle is already taken."""

    def __init__(self, handle: str) -> None:
        super().__init__(
            error_code=ErrorCode.HANDLE_TAKEN,
            message="That handle already exists",
            status_code=409,
            details={"handle": handle},
        )


class ProfileAlreadyExistsError(AppException):
    """A profile already exists for this user."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_EXISTS,
            message="A profile already exists for this user",
            status_code=409,
            details={"user_id": user_id},
        )


class AlreadyLikedError(AppException):
    """User already liked the post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ALREADY_LIKED,
            message="User already liked this post",
            status_code=409,
            details={"post_id": post_id},
        )


class NotLikedError(AppException):
    """User has not liked the post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_LIKED,
            message="You have not yet liked this post",
            status_code=409,
            details={"post_id": post_id},
        )


class CommentNotFoundError(AppException):
    """No matching comment on the post."""

    def __init__(self, post_id: str, comment_id: str | None = None) -> None:
        details = {"post_id": post_id}
        if comment_id:
            details["comment_id"] = comment_id
        super().__init__(
            error_code=ErrorCode.COMMENT_NOT_FOUND,
            message="Comment does not exist",
            status_code=409,
            details=details,
        )


class ConcurrentModificationError(AppException):
    """The aggregate changed between read and write."""

    def __init__(self, entity_type: str, entity_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.CONCURRENT_MODIFICATION,
            message=f"The {entity_type} was modified concurrently, retry the request",
            status_code=409,
            details={"entity_type": entity_type, "entity_id": entity_id},
        )


class StoreUnavailableError(AppException):
    """Document store unreachable or timed out."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.STORE_UNAVAILABLE,
            message="The data store is temporarily unavailable",
            status_code=503,
        )
