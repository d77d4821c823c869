"""
Dashboard read models.
Aggregates recomputed on every request; nothing here is persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from hourbook.domain.models.project import ProjectStatus


RECENT_ITEMS_LIMIT = 5


@dataclass(frozen=True)
class RecentClient:
    id: int
    name: str
    email: Optional[str]
    project_count: int
    created_at: datetime


@dataclass(frozen=True)
class RecentProject:
    id: int
    title: str
    client_name: str
    status: ProjectStatus
    hourly_rate: Decimal
    created_at: datetime


@dataclass(frozen=True)
class RecentTimeEntry:
    id: int
    description: str
    project_title: str
    client_name: str
    start_time: datetime
    duration_hours: Decimal
    is_billed: bool


@dataclass
class DashboardSummary:
    """Per-user rollup of counts, money and recent activity."""

    active_clients: int = 0
    total_projects: int = 0
    active_projects: int = 0
    total_invoices: int = 0
    unpaid_invoices: int = 0
    unbilled_hours: Decimal = Decimal("0")
    total_revenue: Decimal = Decimal("0")
    pending_revenue: Decimal = Decimal("0")
    recent_clients: List[RecentClient] = field(default_factory=list)
    recent_projects: List[RecentProject] = field(default_factory=list)
    recent_time_entries: List[RecentTimeEntry] = field(default_factory=list)
