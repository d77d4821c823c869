"""Numbering service for generating sequential invoice numbers.
Numbers run per owner per calendar year: INV-2025-001, INV-2025-002, ...
"""

import logging
from typing import Optional

from hourbook.domain.models.base import InvoiceNumber, ValidationError


logger = logging.getLogger(__name__)


class NumberingService:
    """
    Domain service for the invoice number sequence.
    It only computes; callers look up the latest stored number and persist the result.
    """

    def __init__(self, prefix: str = "INV"):
        self.prefix = prefix

    def year_prefix(self, year: int) -> str:
        """Prefix shared by every number issued in the given year."""
        return InvoiceNumber.year_prefix(self.prefix, year)

    def next_invoice_number(self, latest_number: Optional[str], year: int) -> str:
        """
        Compute the number that follows ``latest_number`` within ``year``.

        ``latest_number`` is the greatest stored number carrying this year's
        prefix, or None. A suffix that does not parse restarts at 001 and is
        logged, since it points at corrupted data.
        """
        if not latest_number:
            return str(InvoiceNumber.first(self.prefix, year))

        prefix = self.year_prefix(year)
        if not latest_number.startswith(prefix):
            logger.warning(
                f"Latest invoice number {latest_number!r} does not carry prefix {prefix!r}; restarting sequence"
            )
            return str(InvoiceNumber.first(self.prefix, year))

        try:
            current = InvoiceNumber(self.prefix, year, int(latest_number[len(prefix):]))
        except (ValueError, ValidationError):
            logger.warning(
                f"Could not parse sequence of invoice number {latest_number!r}; restarting at 001"
            )
            return str(InvoiceNumber.first(self.prefix, year))

        return str(current.next())
