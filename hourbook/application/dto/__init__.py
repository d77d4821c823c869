"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import (
    BaseDTO,
    RequestDTO,
    ResponseDTO,
    CreateRequestDTO,
    UpdateRequestDTO,
    ListRequestDTO,
    GenerateTextRequestDTO,
    GeneratedTextResponseDTO,
)
from .client_dto import (
    CreateClientRequestDTO,
    UpdateClientRequestDTO,
    ListClientsRequestDTO,
    ClientNameCheckRequestDTO,
    ClientResponseDTO,
    ClientDeleteResponseDTO,
    ClientNameAvailabilityResponseDTO,
    DeleteOutcome,
)
from .project_dto import (
    CreateProjectRequestDTO,
    UpdateProjectRequestDTO,
    ProjectResponseDTO,
)
from .time_entry_dto import (
    CreateTimeEntryRequestDTO,
    UpdateTimeEntryRequestDTO,
    TimeEntryResponseDTO,
    ToggleBilledResponseDTO,
    GenerateDescriptionRequestDTO,
)
from .invoice_dto import (
    CreateInvoiceRequestDTO,
    UpdateInvoiceRequestDTO,
    InvoiceResponseDTO,
    TogglePaidResponseDTO,
    InvoiceNumberPreviewResponseDTO,
    GenerateFromTimeEntriesRequestDTO,
    GenerateFromTimeEntriesResponseDTO,
    GenerateNotesRequestDTO,
)
from .dashboard_dto import DashboardResponseDTO
from .user_dto import UpdateUserProfileRequestDTO, UserProfileResponseDTO

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "CreateRequestDTO",
    "UpdateRequestDTO",
    "ListRequestDTO",
    "GenerateTextRequestDTO",
    "GeneratedTextResponseDTO",
    "CreateClientRequestDTO",
    "UpdateClientRequestDTO",
    "ListClientsRequestDTO",
    "ClientNameCheckRequestDTO",
    "ClientResponseDTO",
    "ClientDeleteResponseDTO",
    "ClientNameAvailabilityResponseDTO",
    "DeleteOutcome",
    "CreateProjectRequestDTO",
    "UpdateProjectRequestDTO",
    "ProjectResponseDTO",
    "CreateTimeEntryRequestDTO",
    "UpdateTimeEntryRequestDTO",
    "TimeEntryResponseDTO",
    "ToggleBilledResponseDTO",
    "GenerateDescriptionRequestDTO",
    "CreateInvoiceRequestDTO",
    "UpdateInvoiceRequestDTO",
    "InvoiceResponseDTO",
    "TogglePaidResponseDTO",
    "InvoiceNumberPreviewResponseDTO",
    "GenerateFromTimeEntriesRequestDTO",
    "GenerateFromTimeEntriesResponseDTO",
    "GenerateNotesRequestDTO",
    "DashboardResponseDTO",
    "UpdateUserProfileRequestDTO",
    "UserProfileResponseDTO",
]
