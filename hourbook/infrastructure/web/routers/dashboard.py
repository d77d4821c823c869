"""
Dashboard router.
"""

from typing import Annotated
from fastapi import APIRouter, Depends

from hourbook.infrastructure.auth import get_current_owner
from hourbook.infrastructure.repositories import SQLAlchemyDashboardRepository
from hourbook.infrastructure.web.dependencies import get_billing_service, get_dashboard_repository, unwrap
from hourbook.application.use_cases.dashboard_use_cases import GetDashboardUseCase
from hourbook.application.dto.dashboard_dto import DashboardResponseDTO
from hourbook.domain.services.billing_service import BillingService


router = APIRouter()


@router.get("", response_model=DashboardResponseDTO)
async def get_dashboard(
    user_id: Annotated[str, Depends(get_current_owner)],
    repository: Annotated[SQLAlchemyDashboardRepository, Depends(get_dashboard_repository)],
    billing_service: Annotated[BillingService, Depends(get_billing_service)],
):
    """
    Summary for the current user: client, project and invoice counts,
    unbilled hours, revenue, pending revenue and recent activity.
    """
    use_case = GetDashboardUseCase(repository, billing_service).set_current_user(user_id)
    return unwrap(await use_case.execute(None))
