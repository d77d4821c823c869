"""
Time entry mapper for converting between domain entities and database models.
"""

from decimal import Decimal

from hourbook.domain.models.time_entry import TimeEntry
from hourbook.infrastructure.db.models import TimeEntryModel


class TimeEntryMapper:
    """Maps between TimeEntry domain entity and TimeEntryModel database model."""

    def domain_to_model(self, entry: TimeEntry) -> TimeEntryModel:
        """Convert a new TimeEntry domain entity to TimeEntryModel."""
        return TimeEntryModel(
            id=entry.id,
            owner_id=entry.owner_id,
            project_id=entry.project_id,
            start_time=entry.start_time,
            end_time=entry.end_time,
            description=entry.description,
            is_billed=entry.is_billed,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )

    def update_model(self, model: TimeEntryModel, entry: TimeEntry) -> None:
        """Copy editable fields onto a loaded model."""
        model.project_id = entry.project_id
        model.start_time = entry.start_time
        model.end_time = entry.end_time
        model.description = entry.description
        model.is_billed = entry.is_billed
        model.updated_at = entry.updated_at

    def model_to_domain(self, model: TimeEntryModel) -> TimeEntry:
        """Convert TimeEntryModel to TimeEntry, carrying project and client context."""
        project = model.project
        client = project.client if project else None
        return TimeEntry(
            id=model.id,
            owner_id=model.owner_id,
            project_id=model.project_id,
            start_time=model.start_time,
            end_time=model.end_time,
            description=model.description,
            is_billed=model.is_billed,
            project_title=project.title if project else None,
            hourly_rate=Decimal(str(project.hourly_rate)) if project is not None else None,
            client_id=client.id if client else None,
            client_name=client.name if client else None,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
