"""
Time entry domain model.
A logged interval of work against a project.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from hourbook.domain.models.base import (
    AggregateRoot,
    ValidationError,
    require_text,
)

SECONDS_PER_HOUR = Decimal(3600)


@dataclass
class TimeEntry(AggregateRoot):
    """
    Time entry aggregate root.
    Duration and amount are always derived, never stored.
    """

    project_id: Optional[int] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    description: str = ""
    is_billed: bool = False

    # Denormalized for display and billing, never persisted
    project_title: Optional[str] = None
    client_id: Optional[int] = None
    client_name: Optional[str] = None
    hourly_rate: Optional[Decimal] = None

    def __post_init__(self):
        """Initialize time entry after creation."""
        super().__post_init__()
        self.validate()

    def validate(self) -> None:
        """Validate time entry state."""
        if not self.owner_id:
            raise ValidationError("Owner ID is required", "owner_id")

        if not self.project_id:
            raise ValidationError("Project is required", "project_id")

        if self.start_time is None:
            raise ValidationError("Start time is required", "start_time")

        if self.end_time is None:
            raise ValidationError("End time is required", "end_time")

        if self.end_time <= self.start_time:
            raise ValidationError("End time must be after start time", "end_time")

        self.description = require_text(self.description, "description", "Description", 1000)

    @classmethod
    def create(
        cls,
        owner_id: str,
        project_id: int,
        start_time: datetime,
        end_time: datetime,
        description: str,
        is_billed: bool = False,
    ) -> "TimeEntry":
        """Create a new time entry."""
        return cls(
            owner_id=owner_id,
            project_id=project_id,
            start_time=start_time,
            end_time=end_time,
            description=description,
            is_billed=is_billed,
        )

    @staticmethod
    def hours_between(start_time: Optional[datetime], end_time: Optional[datetime]) -> Decimal:
        """Hours between two instants, zero when the interval is empty or reversed."""
        if start_time is None or end_time is None or end_time <= start_time:
            return Decimal("0")
        return Decimal(str((end_time - start_time).total_seconds())) / SECONDS_PER_HOUR

    @property
    def duration_hours(self) -> Decimal:
        """Duration in hours (0 when end <= start)."""
        return self.hours_between(self.start_time, self.end_time)

    def amount_for(self, hourly_rate: Decimal) -> Decimal:
        """Duration multiplied by the given hourly rate."""
        return self.duration_hours * Decimal(str(hourly_rate))

    @property
    def amount(self) -> Optional[Decimal]:
        """Amount at the project's rate, when the rate was loaded."""
        if self.hourly_rate is None:
            return None
        return self.amount_for(self.hourly_rate)

    def update_info(
        self,
        project_id: int,
        start_time: datetime,
        end_time: datetime,
        description: str,
        is_billed: bool,
    ) -> None:
        """Replace the editable time entry fields."""
        self.project_id = project_id
        self.start_time = start_time
        self.end_time = end_time
        self.description = description
        self.is_billed = is_billed

        self.validate()
        self.mark_as_updated()

    def toggle_billed(self) -> bool:
        """Flip the billed flag and return the new value."""
        self.is_billed = not self.is_billed
        self.mark_as_updated()
        return self.is_billed
