"""
Dashboard DTOs.
"""

from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from .base_dto import BaseDTO
from hourbook.domain.models.dashboard import DashboardSummary
from hourbook.domain.models.project import ProjectStatus


class RecentClientDTO(BaseDTO):
    id: int
    name: str
    email: Optional[str] = None
    project_count: int
    created_at: datetime


class RecentProjectDTO(BaseDTO):
    id: int
    title: str
    client_name: str
    status: ProjectStatus
    hourly_rate: Decimal
    created_at: datetime


class RecentTimeEntryDTO(BaseDTO):
    id: int
    description: str
    project_title: str
    client_name: str
    start_time: datetime
    duration_hours: Decimal
    is_billed: bool


class DashboardResponseDTO(BaseDTO):
    """Counts, money totals and recent activity for the current user."""

    active_clients: int
    total_projects: int
    active_projects: int
    total_invoices: int
    unpaid_invoices: int
    unbilled_hours: Decimal
    total_revenue: Decimal
    pending_revenue: Decimal
    recent_clients: List[RecentClientDTO]
    recent_projects: List[RecentProjectDTO]
    recent_time_entries: List[RecentTimeEntryDTO]

    @classmethod
    def from_domain(cls, summary: DashboardSummary) -> "DashboardResponseDTO":
        return cls(
            active_clients=summary.active_clients,
            total_projects=summary.total_projects,
            active_projects=summary.active_projects,
            total_invoices=summary.total_invoices,
            unpaid_invoices=summary.unpaid_invoices,
            unbilled_hours=summary.unbilled_hours,
            total_revenue=summary.total_revenue,
            pending_revenue=summary.pending_revenue,
            recent_clients=[RecentClientDTO(**vars(item)) for item in summary.recent_clients],
            recent_projects=[RecentProjectDTO(**vars(item)) for item in summary.recent_projects],
            recent_time_entries=[RecentTimeEntryDTO(**vars(item)) for item in summary.recent_time_entries],
        )
