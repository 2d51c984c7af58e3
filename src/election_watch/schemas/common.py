"""Common Pydantic v2 schemas shared across the API.

Every response uses the same envelope: ``{"success": true, "data": ...}``
on success and ``{"success": false, "error": "..."}`` on failure.
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class SuccessEnvelope(BaseModel, Generic[DataT]):
    """Successful response body."""

    success: Literal[True] = True
    data: DataT


class ErrorEnvelope(BaseModel):
    """Failed response body."""

    success: Literal[False] = False
    error: str = Field(description="Human-readable error message")
