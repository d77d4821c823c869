"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .client_repository import ClientRepository
from .project_repository import ProjectRepository
from .time_entry_repository import TimeEntryRepository
from .invoice_repository import InvoiceRepository
from .user_repository import UserRepository
from .dashboard_repository import DashboardRepository
from .unit_of_work import UnitOfWork

__all__ = [
    "ClientRepository",
    "ProjectRepository",
    "TimeEntryRepository",
    "InvoiceRepository",
    "UserRepository",
    "DashboardRepository",
    "UnitOfWork",
]
