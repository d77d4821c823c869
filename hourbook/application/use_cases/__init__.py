"""
Application layer use cases.
Business logic for time tracking and invoicing.
"""

from .base_use_case import (
    UseCaseResult,
    BaseUseCase,
    QueryUseCase,
    CommandUseCase,
    CreateUseCase,
    UpdateUseCase,
    DeleteUseCase,
    GetByIdUseCase,
    ListUseCase,
    AuthorizedUseCase,
)
from .client_use_cases import (
    CreateClientUseCase,
    UpdateClientUseCase,
    GetClientUseCase,
    ListClientsUseCase,
    DeleteClientUseCase,
    DeactivateClientUseCase,
    ReactivateClientUseCase,
    CheckClientNameUseCase,
)
from .project_use_cases import (
    CreateProjectUseCase,
    UpdateProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    DeleteProjectUseCase,
)
from .time_entry_use_cases import (
    CreateTimeEntryUseCase,
    UpdateTimeEntryUseCase,
    GetTimeEntryUseCase,
    ListTimeEntriesUseCase,
    DeleteTimeEntryUseCase,
    ToggleBilledUseCase,
    GenerateDescriptionUseCase,
)
from .invoice_use_cases import (
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
from .dashboard_use_cases import GetDashboardUseCase
from .user_use_cases import GetUserProfileUseCase, UpdateUserProfileUseCase

__all__ = [
    # Base Use Cases
    "UseCaseResult",
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "CreateUseCase",
    "UpdateUseCase",
    "DeleteUseCase",
    "GetByIdUseCase",
    "ListUseCase",
    "AuthorizedUseCase",

    # Client Use Cases
    "CreateClientUseCase",
    "UpdateClientUseCase",
    "GetClientUseCase",
    "ListClientsUseCase",
    "DeleteClientUseCase",
    "DeactivateClientUseCase",
    "ReactivateClientUseCase",
    "CheckClientNameUseCase",

    # Project Use Cases
    "CreateProjectUseCase",
    "UpdateProjectUseCase",
    "GetProjectUseCase",
    "ListProjectsUseCase",
    "DeleteProjectUseCase",

    # Time Entry Use Cases
    "CreateTimeEntryUseCase",
    "UpdateTimeEntryUseCase",
    "GetTimeEntryUseCase",
    "ListTimeEntriesUseCase",
    "DeleteTimeEntryUseCase",
    "ToggleBilledUseCase",
    "GenerateDescriptionUseCase",

    # Invoice Use Cases
    "CreateInvoiceUseCase",
    "UpdateInvoiceUseCase",
    "GetInvoiceUseCase",
    "ListInvoicesUseCase",
    "DeleteInvoiceUseCase",
    "TogglePaidUseCase",
    "InvoiceNumberPreviewUseCase",
    "GenerateFromTimeEntriesUseCase",
    "GenerateInvoiceNotesUseCase",

    # Dashboard and profile
    "GetDashboardUseCase",
    "GetUserProfileUseCase",
    "UpdateUserProfileUseCase",
]
