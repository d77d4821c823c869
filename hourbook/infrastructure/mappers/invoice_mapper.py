"""
Invoice mapper for converting between domain entities and database models.
"""

from decimal import Decimal

from hourbook.domain.models.invoice import Invoice
from hourbook.infrastructure.db.models import InvoiceModel


class InvoiceMapper:
    """Maps between Invoice domain entity and InvoiceModel database model."""

    def domain_to_model(self, invoice: Invoice) -> InvoiceModel:
        """Convert a new Invoice domain entity to InvoiceModel (time entry links are set by the repository)."""
        return InvoiceModel(
            id=invoice.id,
            owner_id=invoice.owner_id,
            client_id=invoice.client_id,
            invoice_number=invoice.invoice_number,
            invoice_date=invoice.invoice_date,
            due_date=invoice.due_date,
            total_amount=invoice.total_amount,
            is_paid=invoice.is_paid,
            payment_date=invoice.payment_date,
            notes=invoice.notes,
            created_at=invoice.created_at,
            updated_at=invoice.updated_at,
        )

    def update_model(self, model: InvoiceModel, invoice: Invoice) -> None:
        """Copy editable fields onto a loaded model."""
        model.client_id = invoice.client_id
        model.invoice_number = invoice.invoice_number
        model.invoice_date = invoice.invoice_date
        model.due_date = invoice.due_date
        model.total_amount = invoice.total_amount
        model.is_paid = invoice.is_paid
        model.payment_date = invoice.payment_date
        model.notes = invoice.notes
        model.updated_at = invoice.updated_at

    def model_to_domain(self, model: InvoiceModel) -> Invoice:
        """Convert InvoiceModel to Invoice domain entity."""
        return Invoice(
            id=model.id,
            owner_id=model.owner_id,
            client_id=model.client_id,
            invoice_number=model.invoice_number,
            invoice_date=model.invoice_date,
            due_date=model.due_date,
            total_amount=Decimal(str(model.total_amount or 0)),
            is_paid=model.is_paid,
            payment_date=model.payment_date,
            notes=model.notes,
            time_entry_ids=sorted(entry.id for entry in model.time_entries),
            client_name=model.client.name if model.client else None,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
