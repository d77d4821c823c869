"""
Domain services for Hourbook.
This module exports all domain services for complex business logic.
"""

from .billing_service import BillingService, BillableLine, UnbilledPreview
from .numbering_service import NumberingService

__all__ = [
    "BillingService",
    "BillableLine",
    "UnbilledPreview",
    "NumberingService",
]
