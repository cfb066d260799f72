"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response.

    ``details`` carries the field -> message map for validation failures.
    """

    error_code: str
    message: str
    details: Any | None = None
