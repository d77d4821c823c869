"""
Infrastructure repositories module.
Contains SQLAlchemy implementations of domain repositories.
"""

from .user_repository import SQLAlchemyUserRepository
from .client_repository import SQLAlchemyClientRepository
from .project_repository import SQLAlchemyProjectRepository
from .time_entry_repository import SQLAlchemyTimeEntryRepository
from .invoice_repository import SQLAlchemyInvoiceRepository
from .dashboard_repository import SQLAlchemyDashboardRepository
from .unit_of_work import SQLAlchemyUnitOfWork

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyClientRepository",
    "SQLAlchemyProjectRepository",
    "SQLAlchemyTimeEntryRepository",
    "SQLAlchemyInvoiceRepository",
    "SQLAlchemyDashboardRepository",
    "SQLAlchemyUnitOfWork",
]
