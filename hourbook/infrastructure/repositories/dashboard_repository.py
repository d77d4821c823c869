"""
Dashboard queries using SQLAlchemy.
Everything is recomputed per call; no caching.
"""

from decimal import Decimal
from sqlalchemy import func
from sqlalchemy.orm import Session

from hourbook.domain.models.dashboard import (
    DashboardSummary,
    RecentClient,
    RecentProject,
    RecentTimeEntry,
    RECENT_ITEMS_LIMIT,
)
from hourbook.domain.models.project import ProjectStatus
from hourbook.domain.models.time_entry import TimeEntry
from hourbook.domain.repositories.dashboard_repository import DashboardRepository as DashboardRepositoryInterface
from hourbook.infrastructure.db.models import ClientModel, ProjectModel, TimeEntryModel, InvoiceModel


class SQLAlchemyDashboardRepository(DashboardRepositoryInterface):
    """SQLAlchemy implementation of the dashboard rollup."""

    def __init__(self, session: Session):
        self.session = session

    def get_summary(self, owner_id: str) -> DashboardSummary:
        """Compute counts, money totals and recent activity for one owner."""
        return DashboardSummary(
            active_clients=self._count(ClientModel, owner_id, ClientModel.is_active.is_(True)),
            total_projects=self._count(ProjectModel, owner_id),
            active_projects=self._count(ProjectModel, owner_id, ProjectModel.status == ProjectStatus.ACTIVE),
            total_invoices=self._count(InvoiceModel, owner_id),
            unpaid_invoices=self._count(InvoiceModel, owner_id, InvoiceModel.is_paid.is_(False)),
            unbilled_hours=self._unbilled_hours(owner_id),
            total_revenue=self._invoice_total(owner_id, paid=True),
            pending_revenue=self._invoice_total(owner_id, paid=False),
            recent_clients=self._recent_clients(owner_id),
            recent_projects=self._recent_projects(owner_id),
            recent_time_entries=self._recent_time_entries(owner_id),
        )

    def _count(self, model, owner_id: str, *criteria) -> int:
        return self.session.query(func.count(model.id)).filter(
            model.owner_id == owner_id, *criteria
        ).scalar() or 0

    def _unbilled_hours(self, owner_id: str) -> Decimal:
        # Interval arithmetic differs per dialect, so durations are summed here
        rows = self.session.query(TimeEntryModel.start_time, TimeEntryModel.end_time).filter(
            TimeEntryModel.owner_id == owner_id,
            TimeEntryModel.is_billed.is_(False),
        ).all()

        return sum((TimeEntry.hours_between(start, end) for start, end in rows), Decimal("0"))

    def _invoice_total(self, owner_id: str, paid: bool) -> Decimal:
        total = self.session.query(
            func.coalesce(func.sum(InvoiceModel.total_amount), 0)
        ).filter(
            InvoiceModel.owner_id == owner_id,
            InvoiceModel.is_paid.is_(paid),
        ).scalar()
        return Decimal(str(total or 0))

    def _recent_clients(self, owner_id: str):
        rows = self.session.query(ClientModel, func.count(ProjectModel.id)).outerjoin(
            ProjectModel, ProjectModel.client_id == ClientModel.id
        ).filter(
            ClientModel.owner_id == owner_id,
            ClientModel.is_active.is_(True),
        ).group_by(ClientModel.id).order_by(
            ClientModel.created_at.desc(), ClientModel.id.desc()
        ).limit(RECENT_ITEMS_LIMIT).all()

        return [
            RecentClient(
                id=client.id,
                name=client.name,
                email=client.email,
                project_count=project_count,
                created_at=client.created_at,
            )
            for client, project_count in rows
        ]

    def _recent_projects(self, owner_id: str):
        rows = self.session.query(ProjectModel, ClientModel.name).join(
            ClientModel, ProjectModel.client_id == ClientModel.id
        ).filter(
            ProjectModel.owner_id == owner_id
        ).order_by(
            ProjectModel.created_at.desc(), ProjectModel.id.desc()
        ).limit(RECENT_ITEMS_LIMIT).all()

        return [
            RecentProject(
                id=project.id,
                title=project.title,
                client_name=client_name,
                status=project.status,
                hourly_rate=Decimal(str(project.hourly_rate)),
                created_at=project.created_at,
            )
            for project, client_name in rows
        ]

    def _recent_time_entries(self, owner_id: str):
        rows = self.session.query(TimeEntryModel, ProjectModel.title, ClientModel.name).join(
            ProjectModel, TimeEntryModel.project_id == ProjectModel.id
        ).join(
            ClientModel, ProjectModel.client_id == ClientModel.id
        ).filter(
            TimeEntryModel.owner_id == owner_id
        ).order_by(
            TimeEntryModel.start_time.desc(), TimeEntryModel.id.desc()
        ).limit(RECENT_ITEMS_LIMIT).all()

        return [
            RecentTimeEntry(
                id=entry.id,
                description=entry.description,
                project_title=project_title,
                client_name=client_name,
                start_time=entry.start_time,
                duration_hours=TimeEntry.hours_between(entry.start_time, entry.end_time),
                is_billed=entry.is_billed,
            )
            for entry, project_title, client_name in rows
        ]
