"""
Invoice management router.
Handles invoices, payment tracking and the new-invoice helpers.
"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, status, Query

from hourbook.config import get_settings
from hourbook.domain.services.billing_service import BillingService
from hourbook.domain.services.numbering_service import NumberingService
from hourbook.infrastructure.ai.description_service import AiDescriptionService
from hourbook.infrastructure.auth import get_current_owner
from hourbook.infrastructure.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyInvoiceRepository,
    SQLAlchemyTimeEntryRepository,
    SQLAlchemyUnitOfWork,
)
from hourbook.infrastructure.web.dependencies import (
    get_ai_service,
    get_billing_service,
    get_client_repository,
    get_invoice_repository,
    get_numbering_service,
    get_time_entry_repository,
    get_unit_of_work,
    unwrap,
)
from hourbook.application.use_cases.invoice_use_cases import (
    CreateInvoiceUseCase,
    UpdateInvoiceUseCase,
    GetInvoiceUseCase,
    ListInvoicesUseCase,
    DeleteInvoiceUseCase,
    TogglePaidUseCase,
    InvoiceNumberPreviewUseCase,
    GenerateFromTimeEntriesUseCase,
    GenerateInvoiceNotesUseCase,
)
from hourbook.application.dto.base_dto import ListRequestDTO, GeneratedTextResponseDTO
from hourbook.application.dto.invoice_dto import (
    CreateInvoiceRequestDTO,
    UpdateInvoiceRequestDTO,
    InvoiceResponseDTO,
    TogglePaidResponseDTO,
    InvoiceNumberPreviewResponseDTO,
    GenerateFromTimeEntriesRequestDTO,
    GenerateFromTimeEntriesResponseDTO,
    GenerateNotesRequestDTO,
)


router = APIRouter()

OwnerId = Annotated[str, Depends(get_current_owner)]
InvoiceRepo = Annotated[SQLAlchemyInvoiceRepository, Depends(get_invoice_repository)]
ClientRepo = Annotated[SQLAlchemyClientRepository, Depends(get_client_repository)]
TimeEntryRepo = Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)]
UnitOfWorkDep = Annotated[SQLAlchemyUnitOfWork, Depends(get_unit_of_work)]
Numbering = Annotated[NumberingService, Depends(get_numbering_service)]
Billing = Annotated[BillingService, Depends(get_billing_service)]


@router.get("", response_model=List[InvoiceResponseDTO])
async def list_invoices(
    user_id: OwnerId,
    repository: InvoiceRepo,
    search: Optional[str] = Query(None, max_length=200, description="Search invoice number, client name and notes"),
):
    """List invoices, newest invoice date first."""
    use_case = ListInvoicesUseCase(repository).set_current_user(user_id)
    return unwrap(await use_case.execute(ListRequestDTO(search=search)))


@router.get("/number-preview", response_model=InvoiceNumberPreviewResponseDTO)
async def preview_invoice_number(
    user_id: OwnerId,
    repository: InvoiceRepo,
    numbering_service: Numbering,
    billing_service: Billing,
):
    """Next invoice number with today's date and the default due date."""
    use_case = InvoiceNumberPreviewUseCase(repository, numbering_service, billing_service).set_current_user(user_id)
    return unwrap(await use_case.execute(None))


@router.post("/generate-from-time-entries", response_model=GenerateFromTimeEntriesResponseDTO)
async def generate_from_time_entries(
    request: GenerateFromTimeEntriesRequestDTO,
    user_id: OwnerId,
    client_repository: ClientRepo,
    time_entry_repository: TimeEntryRepo,
    billing_service: Billing,
):
    """
    Price the client's unbilled time for a new invoice. Nothing is saved.

    - **client_id**: Active client (required)
    - **start_date**, **end_date**: Inclusive range on the entries' start date
    - **project_id**: Optional project filter
    """
    use_case = GenerateFromTimeEntriesUseCase(
        client_repository, time_entry_repository, billing_service
    ).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.post("/generate-notes", response_model=GeneratedTextResponseDTO)
async def generate_notes(
    request: GenerateNotesRequestDTO,
    user_id: OwnerId,
    client_repository: ClientRepo,
    ai_service: Annotated[AiDescriptionService, Depends(get_ai_service)],
    billing_service: Billing,
):
    """Draft invoice notes with the AI assistant."""
    use_case = GenerateInvoiceNotesUseCase(client_repository, ai_service, billing_service).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.get("/{invoice_id}", response_model=InvoiceResponseDTO)
async def get_invoice(invoice_id: int, user_id: OwnerId, repository: InvoiceRepo):
    """Get an invoice by ID."""
    use_case = GetInvoiceUseCase(repository).set_current_user(user_id)
    return unwrap(await use_case.execute(invoice_id))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InvoiceResponseDTO)
async def create_invoice(
    request: CreateInvoiceRequestDTO,
    user_id: OwnerId,
    repository: InvoiceRepo,
    client_repository: ClientRepo,
    time_entry_repository: TimeEntryRepo,
    unit_of_work: UnitOfWorkDep,
    numbering_service: Numbering,
    billing_service: Billing,
):
    """
    Create an invoice.

    - **client_id**: Active client (required)
    - **total_amount**: Invoice total (required, >= 0)
    - **invoice_number**: Defaults to the next number in this year's sequence
    - **invoice_date**, **due_date**: Default to today and the payment term
    - **time_entry_ids**: Time entries covered by the invoice
    """
    use_case = CreateInvoiceUseCase(
        repository,
        client_repository,
        time_entry_repository,
        unit_of_work,
        numbering_service=numbering_service,
        billing_service=billing_service,
        max_number_attempts=get_settings().invoice_number_max_attempts,
    ).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.put("/{invoice_id}", response_model=InvoiceResponseDTO)
async def update_invoice(
    invoice_id: int,
    request: UpdateInvoiceRequestDTO,
    user_id: OwnerId,
    repository: InvoiceRepo,
    client_repository: ClientRepo,
    time_entry_repository: TimeEntryRepo,
    unit_of_work: UnitOfWorkDep,
):
    """Update an invoice."""
    request.id = invoice_id
    use_case = UpdateInvoiceUseCase(
        repository, client_repository, time_entry_repository, unit_of_work
    ).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_id: int,
    user_id: OwnerId,
    repository: InvoiceRepo,
    unit_of_work: UnitOfWorkDep,
):
    """Delete an invoice."""
    use_case = DeleteInvoiceUseCase(repository, unit_of_work).set_current_user(user_id)
    unwrap(await use_case.execute(invoice_id))


@router.post("/{invoice_id}/toggle-paid", response_model=TogglePaidResponseDTO)
async def toggle_paid(
    invoice_id: int,
    user_id: OwnerId,
    repository: InvoiceRepo,
    unit_of_work: UnitOfWorkDep,
):
    """Flip the paid flag. Marking paid stamps the payment date, unpaid clears it."""
    use_case = TogglePaidUseCase(repository, unit_of_work).set_current_user(user_id)
    return unwrap(await use_case.execute(invoice_id))
