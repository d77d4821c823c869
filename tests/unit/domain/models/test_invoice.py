"""
Unit tests for Invoice domain model and invoice numbers.
"""

import pytest
from datetime import date, datetime
from decimal import Decimal

from hourbook.domain.models.invoice import Invoice
from hourbook.domain.models.base import InvoiceNumber, ValidationError


def make_invoice(**overrides):
    data = {
        "owner_id": "user123",
        "client_id": 1,
        "invoice_number": "INV-2026-001",
        "invoice_date": date(2026, 3, 1),
        "due_date": date(2026, 3, 31),
        "total_amount": Decimal("100.00"),
    }
    data.update(overrides)
    return Invoice.create(**data)


class TestInvoicePayment:
    """Paid flag and payment date rules."""

    def test_new_invoice_is_unpaid(self):
        invoice = make_invoice()

        assert invoice.is_paid is False
        assert invoice.payment_date is None

    def test_paid_without_date_stamps_now(self):
        before = datetime.utcnow()
        invoice = make_invoice(is_paid=True)

        assert invoice.is_paid is True
        assert invoice.payment_date >= before

    def test_explicit_payment_date_wins(self):
        paid_on = datetime(2026, 3, 15, 12, 0)
        invoice = make_invoice(is_paid=True, payment_date=paid_on)

        assert invoice.payment_date == paid_on

    def test_unpaid_clears_payment_date(self):
        invoice = make_invoice(is_paid=False, payment_date=datetime(2026, 3, 15))

        assert invoice.payment_date is None

    def test_staying_paid_keeps_existing_date(self):
        paid_on = datetime(2026, 3, 15, 12, 0)
        invoice = make_invoice(is_paid=True, payment_date=paid_on)

        invoice.set_payment_status(True)

        assert invoice.payment_date == paid_on

    def test_toggle_paid(self):
        invoice = make_invoice()

        assert invoice.toggle_paid() is True
        assert invoice.payment_date is not None

        assert invoice.toggle_paid() is False
        assert invoice.payment_date is None


class TestInvoiceValidation:

    def test_negative_total_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            make_invoice(total_amount=Decimal("-1"))

    def test_notes_length_limit(self):
        with pytest.raises(ValidationError, match="cannot exceed 500"):
            make_invoice(notes="x" * 501)

    def test_update_keeps_links_when_not_given(self):
        invoice = make_invoice(time_entry_ids=[3, 4])

        invoice.update_info(
            client_id=1,
            invoice_number="INV-2026-001",
            invoice_date=date(2026, 3, 1),
            due_date=date(2026, 4, 15),
            total_amount=Decimal("120.00"),
            notes="Thanks",
            is_paid=False,
            payment_date=None,
        )

        assert invoice.time_entry_ids == [3, 4]
        assert invoice.total_amount == Decimal("120.00")


class TestInvoiceNumber:

    def test_formats_three_digit_sequence(self):
        assert str(InvoiceNumber("INV", 2026, 7)) == "INV-2026-007"
        assert str(InvoiceNumber("INV", 2026, 1234)) == "INV-2026-1234"

    def test_next(self):
        assert str(InvoiceNumber("INV", 2026, 9).next()) == "INV-2026-010"

    def test_sequence_must_be_positive(self):
        with pytest.raises(ValidationError):
            InvoiceNumber("INV", 2026, 0)
