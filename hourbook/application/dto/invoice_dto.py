"""
Invoice DTOs for the application layer.
"""

from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal
from pydantic import Field, field_validator, model_validator

from .base_dto import (
    BaseDTO, RequestDTO, ResponseDTO, CreateRequestDTO, UpdateRequestDTO,
    GenerateTextRequestDTO, to_naive_utc,
)
from hourbook.domain.models.invoice import Invoice
from hourbook.domain.services.billing_service import UnbilledPreview


class InvoiceFieldsDTO(RequestDTO):
    """Invoice fields shared by create and update."""

    client_id: int = Field(gt=0, description="Billed client, must be active")
    total_amount: Decimal = Field(ge=0, max_digits=18, decimal_places=2)
    is_paid: bool = False
    payment_date: Optional[datetime] = Field(default=None, description="Defaults to now when marked paid")
    notes: Optional[str] = Field(default=None, max_length=500)
    time_entry_ids: List[int] = Field(default_factory=list, description="Time entries covered by the invoice")

    @field_validator("payment_date")
    @classmethod
    def normalize_payment_date(cls, v):
        return to_naive_utc(v)


class CreateInvoiceRequestDTO(CreateRequestDTO, InvoiceFieldsDTO):
    """
    DTO for creating an invoice.
    Blank number and dates are filled with the next number, today and the payment term.
    """

    invoice_number: Optional[str] = Field(default=None, max_length=100)
    invoice_date: Optional[date] = None
    due_date: Optional[date] = None


class UpdateInvoiceRequestDTO(UpdateRequestDTO, InvoiceFieldsDTO):
    """DTO for updating an invoice."""

    invoice_number: str = Field(min_length=1, max_length=100)
    invoice_date: date
    due_date: date
    time_entry_ids: Optional[List[int]] = Field(default=None, description="Leave empty to keep the current links")


class InvoiceResponseDTO(ResponseDTO):
    """DTO for invoice responses."""

    owner_id: str
    client_id: int
    client_name: Optional[str] = None
    invoice_number: str
    invoice_date: date
    due_date: date
    total_amount: Decimal
    is_paid: bool
    payment_date: Optional[datetime] = None
    notes: Optional[str] = None
    time_entry_ids: List[int] = Field(default_factory=list)
    version: int

    @classmethod
    def from_domain(cls, invoice: Invoice) -> "InvoiceResponseDTO":
        return cls(
            id=invoice.id,
            owner_id=invoice.owner_id,
            client_id=invoice.client_id,
            client_name=invoice.client_name,
            invoice_number=invoice.invoice_number,
            invoice_date=invoice.invoice_date,
            due_date=invoice.due_date,
            total_amount=invoice.total_amount,
            is_paid=invoice.is_paid,
            payment_date=invoice.payment_date,
            notes=invoice.notes,
            time_entry_ids=invoice.time_entry_ids,
            version=invoice.version,
            created_at=invoice.created_at,
            updated_at=invoice.updated_at,
        )


class TogglePaidResponseDTO(BaseDTO):
    """Result of flipping the paid flag."""

    id: int
    is_paid: bool
    payment_date: Optional[datetime] = None
    version: int


class InvoiceNumberPreviewResponseDTO(BaseDTO):
    """Defaults offered when starting a new invoice."""

    invoice_number: str
    invoice_date: date
    due_date: date


class GenerateFromTimeEntriesRequestDTO(RequestDTO):
    """Criteria for the unbilled time preview."""

    client_id: int = Field(gt=0)
    project_id: Optional[int] = Field(default=None, gt=0)
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def validate_range(self):
        if self.end_date < self.start_date:
            raise ValueError("End date cannot be before start date")
        return self


class UnbilledTimeEntryDTO(BaseDTO):
    """One priced time entry in the preview."""

    id: int
    description: str
    project_title: Optional[str] = None
    start_time: datetime
    duration_hours: Decimal
    amount: Decimal


class GenerateFromTimeEntriesResponseDTO(BaseDTO):
    """Read-only preview of an invoice built from unbilled time."""

    client_id: int
    project_id: Optional[int] = None
    start_date: date
    end_date: date
    entries: List[UnbilledTimeEntryDTO]
    time_entry_ids: List[int]
    total_hours: Decimal
    total_amount: Decimal
    count: int

    @classmethod
    def from_preview(
        cls, request: GenerateFromTimeEntriesRequestDTO, preview: UnbilledPreview
    ) -> "GenerateFromTimeEntriesResponseDTO":
        return cls(
            client_id=request.client_id,
            project_id=request.project_id,
            start_date=request.start_date,
            end_date=request.end_date,
            entries=[
                UnbilledTimeEntryDTO(
                    id=line.time_entry_id,
                    description=line.description,
                    project_title=line.project_title,
                    start_time=line.start_time,
                    duration_hours=line.duration_hours,
                    amount=line.amount,
                )
                for line in preview.lines
            ],
            time_entry_ids=preview.time_entry_ids,
            total_hours=preview.total_hours,
            total_amount=preview.total_amount,
            count=preview.count,
        )


class GenerateNotesRequestDTO(GenerateTextRequestDTO):
    """Input for drafting invoice notes."""

    client_id: Optional[int] = Field(default=None, gt=0)
    total_amount: Optional[Decimal] = Field(default=None, ge=0)
    invoice_date: Optional[date] = None
    due_date: Optional[date] = None
