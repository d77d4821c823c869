"""
Time entry repository implementation using SQLAlchemy.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional, List, Sequence
from sqlalchemy.orm import contains_eager

from hourbook.domain.models.time_entry import TimeEntry
from hourbook.domain.repositories.time_entry_repository import TimeEntryRepository as TimeEntryRepositoryInterface
from hourbook.infrastructure.db.models import TimeEntryModel, ProjectModel, ClientModel, invoice_time_entries
from hourbook.infrastructure.db.search import apply_search
from hourbook.infrastructure.mappers.time_entry_mapper import TimeEntryMapper
from hourbook.infrastructure.repositories.base import SQLAlchemyRepository


class SQLAlchemyTimeEntryRepository(SQLAlchemyRepository, TimeEntryRepositoryInterface):
    """SQLAlchemy implementation of time entry repository."""

    model = TimeEntryModel
    entity_type = "TimeEntry"

    def __init__(self, session):
        super().__init__(session)
        self.mapper = TimeEntryMapper()

    def _with_project(self, owner_id: str):
        """Owned entries joined to their project and client."""
        return self.session.query(TimeEntryModel).join(
            TimeEntryModel.project
        ).join(
            ProjectModel.client
        ).options(
            contains_eager(TimeEntryModel.project).contains_eager(ProjectModel.client)
        ).filter(TimeEntryModel.owner_id == owner_id)

    def save(self, entry: TimeEntry, expected_version: Optional[int] = None) -> TimeEntry:
        """Save a time entry entity."""
        if entry.is_new:
            model = self.mapper.domain_to_model(entry)
            self.session.add(model)
        else:
            model = self._load_for_update(entry.owner_id, entry.id, expected_version)
            self.mapper.update_model(model, entry)

        self._flush(entry.owner_id, entry.id)

        entry.id = model.id
        entry.version = model.version
        return entry

    def get_by_id(self, owner_id: str, entry_id: int) -> Optional[TimeEntry]:
        """Get an owned time entry by ID."""
        model = self._with_project(owner_id).filter(TimeEntryModel.id == entry_id).first()
        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def get_many(self, owner_id: str, entry_ids: Sequence[int]) -> List[TimeEntry]:
        """Owned time entries among the given ids."""
        if not entry_ids:
            return []

        models = self._with_project(owner_id).filter(
            TimeEntryModel.id.in_(list(entry_ids))
        ).order_by(TimeEntryModel.start_time).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def list(self, owner_id: str, search: Optional[str] = None) -> List[TimeEntry]:
        """List time entries, latest start first."""
        query = apply_search(
            self._with_project(owner_id),
            [TimeEntryModel.description, ProjectModel.title, ClientModel.name],
            search,
        )

        models = query.order_by(TimeEntryModel.start_time.desc()).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def find_unbilled(
        self,
        owner_id: str,
        client_id: int,
        start_date: date,
        end_date: date,
        project_id: Optional[int] = None,
    ) -> List[TimeEntry]:
        """Unbilled entries for a client whose start falls within the inclusive date range."""
        range_start = datetime.combine(start_date, time.min)
        range_end = datetime.combine(end_date + timedelta(days=1), time.min)

        query = self._with_project(owner_id).filter(
            TimeEntryModel.is_billed.is_(False),
            ProjectModel.client_id == client_id,
            TimeEntryModel.start_time >= range_start,
            TimeEntryModel.start_time < range_end,
        )
        if project_id is not None:
            query = query.filter(TimeEntryModel.project_id == project_id)

        models = query.order_by(TimeEntryModel.start_time).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def is_invoiced(self, owner_id: str, entry_id: int) -> bool:
        """Whether any invoice links to the entry."""
        return self.session.query(
            self.session.query(invoice_time_entries).filter(
                invoice_time_entries.c.time_entry_id == entry_id
            ).exists()
        ).scalar()
