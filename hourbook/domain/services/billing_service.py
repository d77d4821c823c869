"""
Billing domain service.
Turns unbilled time into invoice-ready amounts.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

from hourbook.domain.models.base import ValidationError
from hourbook.domain.models.time_entry import TimeEntry


CENT = Decimal("0.01")


@dataclass(frozen=True)
class BillableLine:
    """One unbilled time entry priced at its project's rate."""

    time_entry_id: int
    description: str
    project_title: Optional[str]
    start_time: datetime
    duration_hours: Decimal
    amount: Decimal


@dataclass
class UnbilledPreview:
    """Read-only result of pricing a set of unbilled time entries."""

    lines: List[BillableLine] = field(default_factory=list)
    total_hours: Decimal = Decimal("0.00")
    total_amount: Decimal = Decimal("0.00")

    @property
    def count(self) -> int:
        return len(self.lines)

    @property
    def time_entry_ids(self) -> List[int]:
        return [line.time_entry_id for line in self.lines]


class BillingService:
    """
    Domain service for billing calculations.
    Money and hours are Decimal throughout and rounded half-up to cents.
    """

    def __init__(self, payment_term_days: int = 30):
        if payment_term_days < 0:
            raise ValidationError("Payment terms cannot be negative", "payment_term_days")
        self.payment_term_days = payment_term_days

    def price_entry(self, entry: TimeEntry) -> BillableLine:
        """Price a single entry. The entry must carry its project's hourly rate."""
        if entry.hourly_rate is None:
            raise ValidationError(f"Hourly rate not loaded for time entry {entry.id}", "hourly_rate")

        return BillableLine(
            time_entry_id=entry.id,
            description=entry.description,
            project_title=entry.project_title,
            start_time=entry.start_time,
            duration_hours=self.round_hours(entry.duration_hours),
            amount=self.round_currency(entry.amount_for(entry.hourly_rate)),
        )

    def build_unbilled_preview(self, entries: Iterable[TimeEntry]) -> UnbilledPreview:
        """
        Price unbilled entries and total them.
        Billed entries are skipped; the total is the sum of the rounded line amounts.
        """
        preview = UnbilledPreview()
        total_hours = Decimal("0")
        total_amount = Decimal("0")

        for entry in entries:
            if entry.is_billed:
                continue
            line = self.price_entry(entry)
            preview.lines.append(line)
            total_hours += entry.duration_hours
            total_amount += line.amount

        preview.total_hours = self.round_hours(total_hours)
        preview.total_amount = self.round_currency(total_amount)
        return preview

    def default_due_date(self, invoice_date: date) -> date:
        """Due date implied by the configured payment terms."""
        return invoice_date + timedelta(days=self.payment_term_days)

    def round_currency(self, amount: Decimal) -> Decimal:
        """
        Round currency amounts to 2 decimal places.
        """
        return Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)

    def round_hours(self, hours: Decimal) -> Decimal:
        """
        Round hours to 2 decimal places.
        """
        return Decimal(str(hours)).quantize(CENT, rounding=ROUND_HALF_UP)
