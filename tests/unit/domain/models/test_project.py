"""
Unit tests for Project domain model.
"""

import pytest
from datetime import date
from decimal import Decimal

from hourbook.domain.models.project import Project, ProjectStatus
from hourbook.domain.models.base import ValidationError


class TestProject:
    """Test cases for Project domain model."""

    def test_create_project_defaults_to_active(self):
        project = Project.create(owner_id="user123", client_id=1, title="Website", hourly_rate=Decimal("50"))

        assert project.status == ProjectStatus.ACTIVE
        assert project.is_active is True

    def test_status_accepts_plain_strings(self):
        project = Project.create(
            owner_id="user123", client_id=1, title="Website", hourly_rate=Decimal("50"), status="completed"
        )

        assert project.status == ProjectStatus.COMPLETED
        assert project.is_active is False

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError, match="Invalid project status"):
            Project.create(owner_id="user123", client_id=1, title="Website", hourly_rate=Decimal("50"), status="archived")

    def test_negative_rate_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Project.create(owner_id="user123", client_id=1, title="Website", hourly_rate=Decimal("-0.01"))

    def test_zero_rate_allowed(self):
        project = Project.create(owner_id="user123", client_id=1, title="Pro bono", hourly_rate=Decimal("0"))

        assert project.hourly_rate == Decimal("0")

    def test_end_date_not_before_start(self):
        with pytest.raises(ValidationError, match="End date cannot be before start date"):
            Project.create(
                owner_id="user123",
                client_id=1,
                title="Website",
                hourly_rate=Decimal("50"),
                start_date=date(2026, 5, 1),
                end_date=date(2026, 4, 30),
            )

    def test_client_required(self):
        with pytest.raises(ValidationError, match="Client is required"):
            Project.create(owner_id="user123", client_id=None, title="Website", hourly_rate=Decimal("50"))

    def test_update_info(self):
        project = Project.create(owner_id="user123", client_id=1, title="Website", hourly_rate=Decimal("50"))

        project.update_info(
            client_id=2,
            title="Website v2",
            description="Second phase",
            hourly_rate=Decimal("65"),
            status=ProjectStatus.INVOICED,
            start_date=None,
            end_date=None,
        )

        assert project.client_id == 2
        assert project.title == "Website v2"
        assert project.status == ProjectStatus.INVOICED
