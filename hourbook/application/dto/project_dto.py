"""
Project DTOs for the application layer.
"""

from typing import Optional
from datetime import date
from decimal import Decimal
from pydantic import Field, model_validator

from .base_dto import RequestDTO, ResponseDTO, CreateRequestDTO, UpdateRequestDTO
from hourbook.domain.models.project import Project, ProjectStatus


class ProjectFieldsDTO(RequestDTO):
    """Editable project fields."""

    client_id: int = Field(gt=0, description="Owning client, must be active")
    title: str = Field(min_length=1, max_length=200, description="Project title, unique per user")
    description: Optional[str] = Field(default=None, max_length=2000)
    hourly_rate: Decimal = Field(ge=0, max_digits=18, decimal_places=2, description="Hourly rate")
    status: ProjectStatus = Field(default=ProjectStatus.ACTIVE)
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @model_validator(mode="after")
    def validate_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("End date cannot be before start date")
        return self


class CreateProjectRequestDTO(CreateRequestDTO, ProjectFieldsDTO):
    """DTO for creating a project."""
    pass


class UpdateProjectRequestDTO(UpdateRequestDTO, ProjectFieldsDTO):
    """DTO for updating a project."""
    pass


class ProjectResponseDTO(ResponseDTO):
    """DTO for project responses."""

    owner_id: str
    client_id: int
    client_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    hourly_rate: Decimal
    status: ProjectStatus
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    version: int

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponseDTO":
        return cls(
            id=project.id,
            owner_id=project.owner_id,
            client_id=project.client_id,
            client_name=project.client_name,
            title=project.title,
            description=project.description,
            hourly_rate=project.hourly_rate,
            status=project.status,
            start_date=project.start_date,
            end_date=project.end_date,
            version=project.version,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
