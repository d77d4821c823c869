"""
User profile DTOs.
"""

from typing import Optional
from pydantic import Field

from .base_dto import ResponseDTO, UpdateRequestDTO
from hourbook.domain.models.user import UserProfile


class UpdateUserProfileRequestDTO(UpdateRequestDTO):
    """DTO for editing the current user's profile."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    company_name: Optional[str] = Field(default=None, max_length=200)
    address: Optional[str] = Field(default=None, max_length=500)


class UserProfileResponseDTO(ResponseDTO):
    """DTO for the current user's profile."""

    id: str
    first_name: str
    last_name: Optional[str] = None
    company_name: Optional[str] = None
    address: Optional[str] = None
    full_name: str

    @classmethod
    def from_domain(cls, profile: UserProfile) -> "UserProfileResponseDTO":
        return cls(
            id=profile.id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            company_name=profile.company_name,
            address=profile.address,
            full_name=profile.full_name,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )
