"""
Invoice use cases for the application layer.
Implements invoice CRUD, numbering, payment tracking and the
helpers that prefill a new invoice from unbilled time.
"""

import logging
from datetime import date, datetime
from typing import List, Optional

from starlette.concurrency import run_in_threadpool

from hourbook.application.use_cases.base_use_case import (
    CreateUseCase, UpdateUseCase, DeleteUseCase, GetByIdUseCase,
    ListUseCase, QueryUseCase, AuthorizedUseCase,
)
from hourbook.application.dto.base_dto import ListRequestDTO, GeneratedTextResponseDTO
from hourbook.application.dto.invoice_dto import (
    CreateInvoiceRequestDTO, UpdateInvoiceRequestDTO, InvoiceResponseDTO,
    TogglePaidResponseDTO, InvoiceNumberPreviewResponseDTO,
    GenerateFromTimeEntriesRequestDTO, GenerateFromTimeEntriesResponseDTO,
    GenerateNotesRequestDTO,
)
from hourbook.domain.models.base import (
    EntityNotFoundError, ValidationError, DuplicateEntityError, ExternalServiceError,
)
from hourbook.domain.models.client import Client
from hourbook.domain.models.invoice import Invoice
from hourbook.domain.repositories.client_repository import ClientRepository
from hourbook.domain.repositories.invoice_repository import InvoiceRepository
from hourbook.domain.repositories.time_entry_repository import TimeEntryRepository
from hourbook.domain.repositories.unit_of_work import UnitOfWork
from hourbook.domain.services.billing_service import BillingService
from hourbook.domain.services.numbering_service import NumberingService
from hourbook.infrastructure.ai.description_service import AiDescriptionService, AiErrorCode


logger = logging.getLogger(__name__)

NO_UNBILLED_ENTRIES_MESSAGE = "No unbilled time entries found for the selected criteria."
EMPTY_NOTES_PROMPT_MESSAGE = "Please provide a quick prompt so we can generate invoice notes."
DEFAULT_NUMBER_ATTEMPTS = 3


class InvoiceUseCaseMixin:
    """Shared lookups for invoice use cases."""

    invoice_repository: InvoiceRepository
    client_repository: ClientRepository
    time_entry_repository: TimeEntryRepository

    def _get_owned_invoice(self, invoice_id: int) -> Invoice:
        invoice = self.invoice_repository.get_by_id(self.current_user_id, invoice_id)
        if invoice is None:
            raise EntityNotFoundError("Invoice", invoice_id)
        return invoice

    def _require_active_client(self, client_id: int) -> Client:
        client = self.client_repository.get_by_id(self.current_user_id, client_id)
        if client is None:
            raise ValidationError("Please select a valid client", "client_id")
        client.ensure_can_be_billed()
        return client

    def _require_owned_time_entries(self, entry_ids: List[int]) -> List[int]:
        unique_ids = sorted(set(entry_ids))
        found = self.time_entry_repository.get_many(self.current_user_id, unique_ids)
        if len(found) != len(unique_ids):
            raise ValidationError("One or more selected time entries were not found", "time_entry_ids")
        return unique_ids


class CreateInvoiceUseCase(InvoiceUseCaseMixin, AuthorizedUseCase, CreateUseCase[CreateInvoiceRequestDTO, InvoiceResponseDTO]):
    """
    Use case for creating an invoice.

    A blank invoice number is replaced by the next number in the user's
    yearly sequence. When a concurrent request takes the same number the
    unique index rejects it and the number is computed again.
    """

    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        client_repository: ClientRepository,
        time_entry_repository: TimeEntryRepository,
        unit_of_work: UnitOfWork,
        numbering_service: Optional[NumberingService] = None,
        billing_service: Optional[BillingService] = None,
        max_number_attempts: int = DEFAULT_NUMBER_ATTEMPTS,
    ):
        super().__init__()
        self.invoice_repository = invoice_repository
        self.client_repository = client_repository
        self.time_entry_repository = time_entry_repository
        self.unit_of_work = unit_of_work
        self.numbering_service = numbering_service or NumberingService()
        self.billing_service = billing_service or BillingService()
        self.max_number_attempts = max(1, max_number_attempts)

    async def _execute_command_logic(self, request: CreateInvoiceRequestDTO) -> InvoiceResponseDTO:
        self._require_active_client(request.client_id)
        time_entry_ids = self._require_owned_time_entries(request.time_entry_ids)

        invoice_date = request.invoice_date or datetime.utcnow().date()
        due_date = request.due_date or self.billing_service.default_due_date(invoice_date)
        auto_number = not request.invoice_number

        invoice = Invoice.create(
            owner_id=self.current_user_id,
            client_id=request.client_id,
            invoice_number=request.invoice_number or self._next_number(),
            invoice_date=invoice_date,
            due_date=due_date,
            total_amount=request.total_amount,
            notes=request.notes,
            is_paid=request.is_paid,
            payment_date=request.payment_date,
            time_entry_ids=time_entry_ids,
        )

        attempt = 1
        while True:
            try:
                saved_invoice = self.invoice_repository.save(invoice)
                break
            except DuplicateEntityError:
                if not auto_number or attempt >= self.max_number_attempts:
                    raise
                logger.warning(
                    f"Invoice number {invoice.invoice_number} already taken for user "
                    f"{self.current_user_id}; retrying ({attempt}/{self.max_number_attempts})"
                )
                attempt += 1
                invoice.invoice_number = self._next_number(rejected=invoice.invoice_number)

        logger.info(f"Invoice {saved_invoice.invoice_number} created for user {self.current_user_id}")
        return InvoiceResponseDTO.from_domain(self._get_owned_invoice(saved_invoice.id))

    def _next_number(self, rejected: Optional[str] = None) -> str:
        year = datetime.utcnow().year
        latest = self.invoice_repository.get_latest_number_with_prefix(
            self.current_user_id, self.numbering_service.year_prefix(year)
        )
        candidate = self.numbering_service.next_invoice_number(latest, year)
        # never offer the number the unique index just refused
        if candidate == rejected:
            candidate = self.numbering_service.next_invoice_number(rejected, year)
        return candidate


class UpdateInvoiceUseCase(InvoiceUseCaseMixin, AuthorizedUseCase, UpdateUseCase[UpdateInvoiceRequestDTO, InvoiceResponseDTO]):
    """Use case for editing an invoice."""

    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        client_repository: ClientRepository,
        time_entry_repository: TimeEntryRepository,
        unit_of_work: UnitOfWork,
    ):
        super().__init__()
        self.invoice_repository = invoice_repository
        self.client_repository = client_repository
        self.time_entry_repository = time_entry_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, request: UpdateInvoiceRequestDTO) -> InvoiceResponseDTO:
        invoice = self._get_owned_invoice(request.id)
        self._require_active_client(request.client_id)

        time_entry_ids = None
        if request.time_entry_ids is not None:
            time_entry_ids = self._require_owned_time_entries(request.time_entry_ids)

        invoice.update_info(
            client_id=request.client_id,
            invoice_number=request.invoice_number,
            invoice_date=request.invoice_date,
            due_date=request.due_date,
            total_amount=request.total_amount,
            notes=request.notes,
            is_paid=request.is_paid,
            payment_date=request.payment_date,
            time_entry_ids=time_entry_ids,
        )

        saved_invoice = self.invoice_repository.save(invoice, expected_version=request.version)
        return InvoiceResponseDTO.from_domain(self._get_owned_invoice(saved_invoice.id))


class GetInvoiceUseCase(InvoiceUseCaseMixin, AuthorizedUseCase, GetByIdUseCase[int, InvoiceResponseDTO]):

    def __init__(self, invoice_repository: InvoiceRepository):
        super().__init__()
        self.invoice_repository = invoice_repository

    async def _execute_business_logic(self, invoice_id: int) -> InvoiceResponseDTO:
        return InvoiceResponseDTO.from_domain(self._get_owned_invoice(invoice_id))


class ListInvoicesUseCase(AuthorizedUseCase, ListUseCase[ListRequestDTO, List[InvoiceResponseDTO]]):

    def __init__(self, invoice_repository: InvoiceRepository):
        super().__init__()
        self.invoice_repository = invoice_repository

    async def _execute_business_logic(self, request: ListRequestDTO) -> List[InvoiceResponseDTO]:
        invoices = self.invoice_repository.list(self.current_user_id, search=request.search)
        return [InvoiceResponseDTO.from_domain(invoice) for invoice in invoices]


class DeleteInvoiceUseCase(InvoiceUseCaseMixin, AuthorizedUseCase, DeleteUseCase[int, bool]):
    """Use case for deleting an invoice. Linked time entries are kept."""

    def __init__(self, invoice_repository: InvoiceRepository, unit_of_work: UnitOfWork):
        super().__init__()
        self.invoice_repository = invoice_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, invoice_id: int) -> bool:
        self._get_owned_invoice(invoice_id)
        return self.invoice_repository.delete(self.current_user_id, invoice_id)


class TogglePaidUseCase(InvoiceUseCaseMixin, AuthorizedUseCase, UpdateUseCase[int, TogglePaidResponseDTO]):

    def __init__(self, invoice_repository: InvoiceRepository, unit_of_work: UnitOfWork):
        super().__init__()
        self.invoice_repository = invoice_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, invoice_id: int) -> TogglePaidResponseDTO:
        invoice = self._get_owned_invoice(invoice_id)
        invoice.toggle_paid()

        saved_invoice = self.invoice_repository.save(invoice)
        return TogglePaidResponseDTO(
            id=saved_invoice.id,
            is_paid=saved_invoice.is_paid,
            payment_date=saved_invoice.payment_date,
            version=saved_invoice.version,
        )


class InvoiceNumberPreviewUseCase(AuthorizedUseCase, QueryUseCase[None, InvoiceNumberPreviewResponseDTO]):
    """Defaults for a new invoice: next number, today and the payment term."""

    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        numbering_service: Optional[NumberingService] = None,
        billing_service: Optional[BillingService] = None,
    ):
        super().__init__()
        self.invoice_repository = invoice_repository
        self.numbering_service = numbering_service or NumberingService()
        self.billing_service = billing_service or BillingService()

    async def _execute_business_logic(self, request: None) -> InvoiceNumberPreviewResponseDTO:
        today = datetime.utcnow().date()
        latest = self.invoice_repository.get_latest_number_with_prefix(
            self.current_user_id, self.numbering_service.year_prefix(today.year)
        )
        return InvoiceNumberPreviewResponseDTO(
            invoice_number=self.numbering_service.next_invoice_number(latest, today.year),
            invoice_date=today,
            due_date=self.billing_service.default_due_date(today),
        )


class GenerateFromTimeEntriesUseCase(
    InvoiceUseCaseMixin,
    AuthorizedUseCase,
    QueryUseCase[GenerateFromTimeEntriesRequestDTO, GenerateFromTimeEntriesResponseDTO],
):
    """
    Price the client's unbilled time within a date range.
    Read-only: entries stay unbilled until the user saves the invoice and bills them.
    """

    def __init__(
        self,
        client_repository: ClientRepository,
        time_entry_repository: TimeEntryRepository,
        billing_service: Optional[BillingService] = None,
    ):
        super().__init__()
        self.client_repository = client_repository
        self.time_entry_repository = time_entry_repository
        self.billing_service = billing_service or BillingService()

    async def _execute_business_logic(
        self, request: GenerateFromTimeEntriesRequestDTO
    ) -> GenerateFromTimeEntriesResponseDTO:
        self._require_active_client(request.client_id)

        entries = self.time_entry_repository.find_unbilled(
            self.current_user_id,
            client_id=request.client_id,
            start_date=request.start_date,
            end_date=request.end_date,
            project_id=request.project_id,
        )
        if not entries:
            raise ValidationError(NO_UNBILLED_ENTRIES_MESSAGE)

        preview = self.billing_service.build_unbilled_preview(entries)
        return GenerateFromTimeEntriesResponseDTO.from_preview(request, preview)


class GenerateInvoiceNotesUseCase(AuthorizedUseCase, QueryUseCase[GenerateNotesRequestDTO, GeneratedTextResponseDTO]):
    """Draft invoice notes with the AI assistant, using the invoice being edited as context."""

    def __init__(
        self,
        client_repository: ClientRepository,
        ai_service: AiDescriptionService,
        billing_service: Optional[BillingService] = None,
    ):
        super().__init__()
        self.client_repository = client_repository
        self.ai_service = ai_service
        self.billing_service = billing_service or BillingService()

    async def _execute_business_logic(self, request: GenerateNotesRequestDTO) -> GeneratedTextResponseDTO:
        if not request.prompt:
            raise ExternalServiceError(EMPTY_NOTES_PROMPT_MESSAGE, f"AI_{AiErrorCode.INVALID_PROMPT.value}")

        result = await run_in_threadpool(
            self.ai_service.generate,
            request.prompt,
            None,
            None,
            self._build_context(request),
        )

        if not result.success:
            logger.info(f"Invoice notes generation failed for user {self.current_user_id}: {result.error_code}")
            raise ExternalServiceError(result.error, f"AI_{result.error_code.value}")

        return GeneratedTextResponseDTO(text=result.description)

    def _build_context(self, request: GenerateNotesRequestDTO) -> Optional[str]:
        lines = []

        if request.client_id is not None:
            client = self.client_repository.get_by_id(self.current_user_id, request.client_id)
            if client is not None:
                if client.address:
                    lines.append(f"Client: {client.name} — {client.address}")
                else:
                    lines.append(f"Client: {client.name}")

        if request.total_amount is not None:
            total = self.billing_service.round_currency(request.total_amount)
            lines.append(f"Invoice Total: ${total:.2f}")

        if request.invoice_date is not None:
            lines.append(f"Invoice Date: {format_date(request.invoice_date)}")

        if request.due_date is not None:
            due_line = f"Due Date: {format_date(request.due_date)}"
            if request.invoice_date is not None:
                due_line += f" ({(request.due_date - request.invoice_date).days} day terms)"
            lines.append(due_line)

        if request.additional_context:
            lines.append(request.additional_context)

        return "\n".join(lines) or None


def format_date(value: date) -> str:
    """Render dates as e.g. ``Jan 05, 2026``."""
    return value.strftime("%b %d, %Y")
