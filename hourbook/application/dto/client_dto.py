"""
Client DTOs for the application layer.
Data Transfer Objects for client-related operations.
"""

from typing import Optional
from enum import Enum
from pydantic import Field

from .base_dto import (
    RequestDTO, ResponseDTO, CreateRequestDTO, UpdateRequestDTO, BaseDTO, ListRequestDTO,
)
from hourbook.domain.models.client import Client


class ClientFieldsDTO(RequestDTO):
    """Editable client fields."""

    name: str = Field(min_length=1, max_length=200, description="Client name, unique per user")
    email: Optional[str] = Field(default=None, max_length=256, description="Contact email")
    phone: Optional[str] = Field(default=None, max_length=20, description="Phone number")
    address: Optional[str] = Field(default=None, max_length=500, description="Postal address")
    notes: Optional[str] = Field(default=None, max_length=1000, description="Free-text notes")


class CreateClientRequestDTO(CreateRequestDTO, ClientFieldsDTO):
    """DTO for creating a new client."""
    pass


class UpdateClientRequestDTO(UpdateRequestDTO, ClientFieldsDTO):
    """DTO for updating a client."""

    is_active: Optional[bool] = Field(default=None, description="Leave empty to keep the current state")


class ListClientsRequestDTO(ListRequestDTO):
    """DTO for listing clients."""

    include_inactive: bool = Field(default=False, description="Also return deactivated clients")


class ClientNameCheckRequestDTO(RequestDTO):
    """DTO for the name uniqueness check."""

    name: str = Field(min_length=1, max_length=200)
    exclude_id: Optional[int] = Field(default=None, description="Client being edited")


class ClientResponseDTO(ResponseDTO):
    """DTO for client responses."""

    owner_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool
    project_count: int = 0
    version: int

    @classmethod
    def from_domain(cls, client: Client) -> "ClientResponseDTO":
        return cls(
            id=client.id,
            owner_id=client.owner_id,
            name=client.name,
            email=client.email,
            phone=client.phone,
            address=client.address,
            notes=client.notes,
            is_active=client.is_active,
            project_count=client.project_count,
            version=client.version,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )


class DeleteOutcome(str, Enum):
    """What a client delete actually did."""
    HARD_DELETED = "hard_deleted"
    DEACTIVATED = "deactivated"


class ClientDeleteResponseDTO(BaseDTO):
    """DTO describing the outcome of a client delete."""

    client_id: int
    outcome: DeleteOutcome
    message: str


class ClientNameAvailabilityResponseDTO(BaseDTO):
    """DTO for the name uniqueness check."""

    name: str
    available: bool
