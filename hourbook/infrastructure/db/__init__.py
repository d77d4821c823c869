"""
Database infrastructure for Hourbook.
"""

from .database import engine, SessionLocal, get_db, Base, create_db_engine
from .models import (
    UserProfileModel,
    ClientModel,
    ProjectModel,
    TimeEntryModel,
    InvoiceModel,
    invoice_time_entries,
)

__all__ = [
    "engine",
    "SessionLocal",
    "get_db",
    "Base",
    "create_db_engine",
    "UserProfileModel",
    "ClientModel",
    "ProjectModel",
    "TimeEntryModel",
    "InvoiceModel",
    "invoice_time_entries",
]
