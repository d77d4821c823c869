"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field, ConfigDict


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize an aware datetime to naive UTC; naive values are taken as UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        extra="forbid",
        str_strip_whitespace=True,
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateRequestDTO(RequestDTO):
    """Base class for creation request DTOs."""
    pass


class UpdateRequestDTO(RequestDTO):
    """
    Base class for update request DTOs.

    ``id`` is filled from the URL. ``owner_id``, when sent, must name the caller.
    ``version`` is the optimistic concurrency token last read by the client.
    """

    id: Optional[int] = Field(default=None, description="Set from the URL path")
    owner_id: Optional[str] = Field(default=None, description="Must match the authenticated user when present")
    version: Optional[int] = Field(default=None, ge=1, description="Version last read; stale versions are rejected")


class ListRequestDTO(RequestDTO):
    """Base class for list requests with a wildcard search term."""

    search: Optional[str] = Field(default=None, max_length=200, description="Use * as a wildcard")


class GenerateTextRequestDTO(RequestDTO):
    """Common fields of the AI-assisted text helpers."""

    prompt: Optional[str] = Field(default=None, max_length=2000, description="Short instruction for the assistant")
    additional_context: Optional[str] = Field(default=None, max_length=4000, description="Extra free-text context")


class GeneratedTextResponseDTO(BaseDTO):
    """Text produced by the AI assistant."""

    text: str
