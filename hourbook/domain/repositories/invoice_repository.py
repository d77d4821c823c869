"""
Invoice repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from hourbook.domain.models.invoice import Invoice


class InvoiceRepository(ABC):
    """Repository interface for Invoice aggregate."""

    @abstractmethod
    def save(self, invoice: Invoice, expected_version: Optional[int] = None) -> Invoice:
        """
        Insert or update an invoice and its time entry links.
        Raises DuplicateEntityError when the invoice number is taken.
        """
        pass

    @abstractmethod
    def get_by_id(self, owner_id: str, invoice_id: int) -> Optional[Invoice]:
        """Find an owned invoice by id, or None."""
        pass

    @abstractmethod
    def list(self, owner_id: str, search: Optional[str] = None) -> List[Invoice]:
        """List the owner's invoices, newest invoice date first."""
        pass

    @abstractmethod
    def get_latest_number_with_prefix(self, owner_id: str, prefix: str) -> Optional[str]:
        """Invoice number with the greatest numeric suffix after prefix, or None."""
        pass

    @abstractmethod
    def delete(self, owner_id: str, invoice_id: int) -> bool:
        """Hard-delete an owned invoice."""
        pass
