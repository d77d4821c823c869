"""
Invoice repository implementation using SQLAlchemy.
"""

from typing import Optional, List
from sqlalchemy.orm import contains_eager, selectinload

from hourbook.domain.models.invoice import Invoice
from hourbook.domain.repositories.invoice_repository import InvoiceRepository as InvoiceRepositoryInterface
from hourbook.domain.models.base import DuplicateEntityError
from hourbook.infrastructure.db.models import InvoiceModel, ClientModel, TimeEntryModel
from hourbook.infrastructure.db.search import apply_search
from hourbook.infrastructure.mappers.invoice_mapper import InvoiceMapper
from hourbook.infrastructure.repositories.base import SQLAlchemyRepository


class SQLAlchemyInvoiceRepository(SQLAlchemyRepository, InvoiceRepositoryInterface):
    """SQLAlchemy implementation of invoice repository."""

    model = InvoiceModel
    entity_type = "Invoice"

    def __init__(self, session):
        super().__init__(session)
        self.mapper = InvoiceMapper()

    def _with_client(self, owner_id: str):
        return self.session.query(InvoiceModel).join(InvoiceModel.client).options(
            contains_eager(InvoiceModel.client),
            selectinload(InvoiceModel.time_entries),
        ).filter(InvoiceModel.owner_id == owner_id)

    def save(self, invoice: Invoice, expected_version: Optional[int] = None) -> Invoice:
        """Save an invoice entity together with its time entry links."""
        duplicate = self._owned_query(invoice.owner_id).filter(
            InvoiceModel.invoice_number == invoice.invoice_number
        )
        if invoice.id is not None:
            duplicate = duplicate.filter(InvoiceModel.id != invoice.id)
        if self.session.query(duplicate.exists()).scalar():
            raise DuplicateEntityError("Invoice", "invoice_number", invoice.invoice_number)

        if invoice.is_new:
            model = self.mapper.domain_to_model(invoice)
            self.session.add(model)
        else:
            model = self._load_for_update(invoice.owner_id, invoice.id, expected_version)
            self.mapper.update_model(model, invoice)

        model.time_entries = self._owned_time_entries(invoice.owner_id, invoice.time_entry_ids)

        self._flush(invoice.owner_id, invoice.id, unique=("invoice_number", invoice.invoice_number))

        invoice.id = model.id
        invoice.version = model.version
        return invoice

    def _owned_time_entries(self, owner_id: str, entry_ids: List[int]) -> List[TimeEntryModel]:
        if not entry_ids:
            return []
        return self.session.query(TimeEntryModel).filter(
            TimeEntryModel.owner_id == owner_id,
            TimeEntryModel.id.in_(entry_ids),
        ).all()

    def get_by_id(self, owner_id: str, invoice_id: int) -> Optional[Invoice]:
        """Get an owned invoice by ID."""
        model = self._with_client(owner_id).filter(InvoiceModel.id == invoice_id).first()
        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def list(self, owner_id: str, search: Optional[str] = None) -> List[Invoice]:
        """List invoices, newest invoice date first."""
        query = apply_search(
            self._with_client(owner_id),
            [InvoiceModel.invoice_number, ClientModel.name, InvoiceModel.notes],
            search,
        )

        models = query.order_by(InvoiceModel.invoice_date.desc(), InvoiceModel.id.desc()).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def get_latest_number_with_prefix(self, owner_id: str, prefix: str) -> Optional[str]:
        """
        Invoice number with the greatest numeric suffix after prefix.
        Hand-typed numbers whose suffix is not all digits are ignored.
        """
        rows = self.session.query(InvoiceModel.invoice_number).filter(
            InvoiceModel.owner_id == owner_id,
            InvoiceModel.invoice_number.startswith(prefix, autoescape=True),
        ).all()

        latest = None
        latest_sequence = 0
        for (number,) in rows:
            suffix = number[len(prefix):]
            if not (suffix.isascii() and suffix.isdigit()):
                continue
            if int(suffix) > latest_sequence:
                latest, latest_sequence = number, int(suffix)

        return latest
