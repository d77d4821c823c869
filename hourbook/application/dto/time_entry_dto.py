"""
Time entry DTOs for the application layer.
"""

from typing import Optional
from datetime import datetime
from decimal import Decimal
from pydantic import Field, field_validator

from .base_dto import (
    BaseDTO, RequestDTO, ResponseDTO, CreateRequestDTO, UpdateRequestDTO,
    GenerateTextRequestDTO, to_naive_utc,
)
from hourbook.domain.models.time_entry import TimeEntry
from hourbook.domain.services.billing_service import BillingService


class TimeEntryFieldsDTO(RequestDTO):
    """Editable time entry fields."""

    project_id: int = Field(gt=0, description="Project the work belongs to")
    start_time: datetime
    end_time: datetime
    description: str = Field(min_length=1, max_length=1000)
    is_billed: bool = False

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_times(cls, v):
        return to_naive_utc(v)


class CreateTimeEntryRequestDTO(CreateRequestDTO, TimeEntryFieldsDTO):
    """DTO for logging a time entry."""
    pass


class UpdateTimeEntryRequestDTO(UpdateRequestDTO, TimeEntryFieldsDTO):
    """DTO for editing a time entry."""
    pass


class TimeEntryResponseDTO(ResponseDTO):
    """DTO for time entry responses, with derived duration and amount."""

    owner_id: str
    project_id: int
    project_title: Optional[str] = None
    client_id: Optional[int] = None
    client_name: Optional[str] = None
    start_time: datetime
    end_time: datetime
    description: str
    is_billed: bool
    duration_hours: Decimal
    hourly_rate: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    version: int

    @classmethod
    def from_domain(cls, entry: TimeEntry) -> "TimeEntryResponseDTO":
        billing = BillingService()
        amount = entry.amount
        return cls(
            id=entry.id,
            owner_id=entry.owner_id,
            project_id=entry.project_id,
            project_title=entry.project_title,
            client_id=entry.client_id,
            client_name=entry.client_name,
            start_time=entry.start_time,
            end_time=entry.end_time,
            description=entry.description,
            is_billed=entry.is_billed,
            duration_hours=billing.round_hours(entry.duration_hours),
            hourly_rate=entry.hourly_rate,
            amount=billing.round_currency(amount) if amount is not None else None,
            version=entry.version,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )


class ToggleBilledResponseDTO(BaseDTO):
    """Result of flipping the billed flag."""

    id: int
    is_billed: bool
    version: int


class GenerateDescriptionRequestDTO(GenerateTextRequestDTO):
    """Input for drafting a time entry description."""

    project_id: Optional[int] = Field(default=None, gt=0)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_times(cls, v):
        return to_naive_utc(v)
