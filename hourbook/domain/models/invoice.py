"""
Invoice domain model.
A billing document for a client, optionally linked to the time entries it covers.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from hourbook.domain.models.base import (
    AggregateRoot,
    ValidationError,
    require_text,
    optional_text,
)


@dataclass
class Invoice(AggregateRoot):
    """
    Invoice aggregate root.
    Invoice numbers are unique per owner.
    """

    client_id: Optional[int] = None
    invoice_number: str = ""
    invoice_date: Optional[date] = None
    due_date: Optional[date] = None
    total_amount: Decimal = Decimal("0")
    is_paid: bool = False
    payment_date: Optional[datetime] = None
    notes: Optional[str] = None
    time_entry_ids: List[int] = field(default_factory=list)

    # Denormalized for display, never persisted
    client_name: Optional[str] = None

    def __post_init__(self):
        """Initialize invoice after creation."""
        super().__post_init__()
        self.validate()

    def validate(self) -> None:
        """Validate invoice state."""
        if not self.owner_id:
            raise ValidationError("Owner ID is required", "owner_id")

        if not self.client_id:
            raise ValidationError("Client is required", "client_id")

        self.invoice_number = require_text(self.invoice_number, "invoice_number", "Invoice number", 100)

        if self.invoice_date is None:
            raise ValidationError("Invoice date is required", "invoice_date")

        if self.due_date is None:
            raise ValidationError("Due date is required", "due_date")

        try:
            self.total_amount = Decimal(str(self.total_amount))
        except InvalidOperation:
            raise ValidationError("Total amount must be a number", "total_amount")
        if self.total_amount < 0:
            raise ValidationError("Total amount cannot be negative", "total_amount")

        self.notes = optional_text(self.notes, "notes", "Notes", 500)

        if not self.is_paid:
            self.payment_date = None

    @classmethod
    def create(
        cls,
        owner_id: str,
        client_id: int,
        invoice_number: str,
        invoice_date: date,
        due_date: date,
        total_amount: Decimal,
        notes: Optional[str] = None,
        is_paid: bool = False,
        payment_date: Optional[datetime] = None,
        time_entry_ids: Optional[List[int]] = None,
    ) -> "Invoice":
        """Create a new invoice, applying the payment-date rule."""
        invoice = cls(
            owner_id=owner_id,
            client_id=client_id,
            invoice_number=invoice_number,
            invoice_date=invoice_date,
            due_date=due_date,
            total_amount=total_amount,
            notes=notes,
            time_entry_ids=list(time_entry_ids or []),
        )
        invoice.set_payment_status(is_paid, payment_date)
        return invoice

    def update_info(
        self,
        client_id: int,
        invoice_number: str,
        invoice_date: date,
        due_date: date,
        total_amount: Decimal,
        notes: Optional[str],
        is_paid: bool,
        payment_date: Optional[datetime],
        time_entry_ids: Optional[List[int]] = None,
    ) -> None:
        """Replace the editable invoice fields."""
        self.client_id = client_id
        self.invoice_number = invoice_number
        self.invoice_date = invoice_date
        self.due_date = due_date
        self.total_amount = total_amount
        self.notes = notes
        if time_entry_ids is not None:
            self.time_entry_ids = list(time_entry_ids)

        self.set_payment_status(is_paid, payment_date)
        self.validate()
        self.mark_as_updated()

    def set_payment_status(self, is_paid: bool, payment_date: Optional[datetime] = None) -> None:
        """
        Apply the paid flag.

        An explicit payment date always wins. Marking paid without a date keeps
        an existing payment date or stamps the current time. Marking unpaid
        clears the date.
        """
        if not is_paid:
            self.is_paid = False
            self.payment_date = None
            return

        if payment_date is not None:
            self.payment_date = payment_date
        elif not self.is_paid or self.payment_date is None:
            self.payment_date = datetime.utcnow()
        self.is_paid = True

    def toggle_paid(self) -> bool:
        """Flip the paid flag and return the new value."""
        if self.is_paid:
            self.set_payment_status(False)
        else:
            self.set_payment_status(True, datetime.utcnow())
        self.mark_as_updated()
        return self.is_paid
