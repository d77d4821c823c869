"""
Unit tests for TimeEntry domain model.
"""

import pytest
from datetime import datetime
from decimal import Decimal

from hourbook.domain.models.time_entry import TimeEntry
from hourbook.domain.models.base import ValidationError


def make_entry(**overrides):
    data = {
        "owner_id": "user123",
        "project_id": 1,
        "start_time": datetime(2026, 3, 2, 9, 0),
        "end_time": datetime(2026, 3, 2, 11, 0),
        "description": "Homepage wireframes",
    }
    data.update(overrides)
    return TimeEntry.create(**data)


class TestTimeEntry:
    """Test cases for TimeEntry domain model."""

    def test_duration_in_hours(self):
        entry = make_entry()

        assert entry.duration_hours == Decimal("2")

    def test_fractional_duration(self):
        entry = make_entry(end_time=datetime(2026, 3, 2, 10, 15))

        assert entry.duration_hours == Decimal("1.25")

    def test_amount_for_rate(self):
        entry = make_entry()

        assert entry.amount_for(Decimal("50")) == Decimal("100")

    def test_amount_needs_loaded_rate(self):
        entry = make_entry()
        assert entry.amount is None

        entry.hourly_rate = Decimal("75.00")
        assert entry.amount == Decimal("150.00")

    def test_end_must_follow_start(self):
        with pytest.raises(ValidationError, match="End time must be after start time"):
            make_entry(end_time=datetime(2026, 3, 2, 9, 0))

        with pytest.raises(ValidationError):
            make_entry(end_time=datetime(2026, 3, 2, 8, 0))

    def test_description_required(self):
        with pytest.raises(ValidationError, match="Description is required"):
            make_entry(description="  ")

    def test_description_length_limit(self):
        with pytest.raises(ValidationError, match="cannot exceed 1000"):
            make_entry(description="x" * 1001)

    def test_project_required(self):
        with pytest.raises(ValidationError, match="Project is required"):
            make_entry(project_id=None)

    def test_hours_between_is_never_negative(self):
        start = datetime(2026, 3, 2, 11, 0)
        end = datetime(2026, 3, 2, 9, 0)

        assert TimeEntry.hours_between(start, end) == Decimal("0")
        assert TimeEntry.hours_between(None, end) == Decimal("0")

    def test_toggle_billed(self):
        entry = make_entry()

        assert entry.toggle_billed() is True
        assert entry.is_billed is True
        assert entry.toggle_billed() is False

    def test_update_info_revalidates(self):
        entry = make_entry()

        with pytest.raises(ValidationError):
            entry.update_info(
                project_id=1,
                start_time=datetime(2026, 3, 2, 12, 0),
                end_time=datetime(2026, 3, 2, 11, 0),
                description="Moved",
                is_billed=False,
            )
