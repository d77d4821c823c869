"""
Project domain model.
Represents a work engagement for one client, billed at an hourly rate.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from enum import Enum
from decimal import Decimal, InvalidOperation

from hourbook.domain.models.base import (
    AggregateRoot,
    ValidationError,
    require_text,
    optional_text,
)


class ProjectStatus(str, Enum):
    """Project status."""
    ACTIVE = "active"
    COMPLETED = "completed"
    INVOICED = "invoiced"


@dataclass
class Project(AggregateRoot):
    """
    Project aggregate root.
    Titles are unique per owner.
    """

    client_id: Optional[int] = None
    title: str = ""
    description: Optional[str] = None
    hourly_rate: Decimal = Decimal("0")
    status: ProjectStatus = ProjectStatus.ACTIVE
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    # Denormalized for display, never persisted
    client_name: Optional[str] = None

    def __post_init__(self):
        """Initialize project after creation."""
        super().__post_init__()
        self.validate()

    def validate(self) -> None:
        """Validate project state."""
        if not self.owner_id:
            raise ValidationError("Owner ID is required", "owner_id")

        if not self.client_id:
            raise ValidationError("Client is required", "client_id")

        self.title = require_text(self.title, "title", "Project title", 200)
        self.description = optional_text(self.description, "description", "Description", 2000)

        try:
            self.hourly_rate = Decimal(str(self.hourly_rate))
        except InvalidOperation:
            raise ValidationError("Hourly rate must be a number", "hourly_rate")
        if self.hourly_rate < 0:
            raise ValidationError("Hourly rate cannot be negative", "hourly_rate")

        if not isinstance(self.status, ProjectStatus):
            try:
                self.status = ProjectStatus(self.status)
            except ValueError:
                raise ValidationError(f"Invalid project status: {self.status}", "status")

        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValidationError("End date cannot be before start date", "end_date")

    @classmethod
    def create(
        cls,
        owner_id: str,
        client_id: int,
        title: str,
        hourly_rate: Decimal,
        description: Optional[str] = None,
        status: ProjectStatus = ProjectStatus.ACTIVE,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> "Project":
        """Create a new project."""
        return cls(
            owner_id=owner_id,
            client_id=client_id,
            title=title,
            description=description,
            hourly_rate=hourly_rate,
            status=status,
            start_date=start_date,
            end_date=end_date,
        )

    def update_info(
        self,
        client_id: int,
        title: str,
        description: Optional[str],
        hourly_rate: Decimal,
        status: ProjectStatus,
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> None:
        """Replace the editable project fields."""
        self.client_id = client_id
        self.title = title
        self.description = description
        self.hourly_rate = hourly_rate
        self.status = status
        self.start_date = start_date
        self.end_date = end_date

        self.validate()
        self.mark_as_updated()

    @property
    def is_active(self) -> bool:
        """Check if project is active."""
        return self.status == ProjectStatus.ACTIVE
