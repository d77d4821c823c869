"""
Dashboard use case for the application layer.
"""

from dataclasses import replace
from typing import Optional

from hourbook.application.use_cases.base_use_case import QueryUseCase, AuthorizedUseCase
from hourbook.application.dto.dashboard_dto import DashboardResponseDTO
from hourbook.domain.repositories.dashboard_repository import DashboardRepository
from hourbook.domain.services.billing_service import BillingService


class GetDashboardUseCase(AuthorizedUseCase, QueryUseCase[None, DashboardResponseDTO]):
    """Counts, money totals and recent activity for the current user, rounded for display."""

    def __init__(self, dashboard_repository: DashboardRepository, billing_service: Optional[BillingService] = None):
        super().__init__()
        self.dashboard_repository = dashboard_repository
        self.billing_service = billing_service or BillingService()

    async def _execute_business_logic(self, request: None) -> DashboardResponseDTO:
        summary = self.dashboard_repository.get_summary(self.current_user_id)
        billing = self.billing_service

        summary.unbilled_hours = billing.round_hours(summary.unbilled_hours)
        summary.total_revenue = billing.round_currency(summary.total_revenue)
        summary.pending_revenue = billing.round_currency(summary.pending_revenue)
        summary.recent_time_entries = [
            replace(entry, duration_hours=billing.round_hours(entry.duration_hours))
            for entry in summary.recent_time_entries
        ]

        return DashboardResponseDTO.from_domain(summary)
