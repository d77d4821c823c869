"""
Router dependencies.
Request-scoped repositories sharing one session, plus result unwrapping.
"""

from typing import Annotated, TypeVar

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from hourbook.application.use_cases.base_use_case import UseCaseResult
from hourbook.config import get_settings
from hourbook.domain.services.billing_service import BillingService
from hourbook.domain.services.numbering_service import NumberingService
from hourbook.infrastructure.ai.description_service import AiDescriptionService
from hourbook.infrastructure.db.database import get_db
from hourbook.infrastructure.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemyTimeEntryRepository,
    SQLAlchemyInvoiceRepository,
    SQLAlchemyUserRepository,
    SQLAlchemyDashboardRepository,
    SQLAlchemyUnitOfWork,
)
from hourbook.infrastructure.web.middleware.error_handler import status_for_error_code


T = TypeVar("T")

DbSession = Annotated[Session, Depends(get_db)]


def get_client_repository(session: DbSession) -> SQLAlchemyClientRepository:
    """Dependency to get client repository."""
    return SQLAlchemyClientRepository(session)


def get_project_repository(session: DbSession) -> SQLAlchemyProjectRepository:
    """Dependency to get project repository."""
    return SQLAlchemyProjectRepository(session)


def get_time_entry_repository(session: DbSession) -> SQLAlchemyTimeEntryRepository:
    """Dependency to get time entry repository."""
    return SQLAlchemyTimeEntryRepository(session)


def get_invoice_repository(session: DbSession) -> SQLAlchemyInvoiceRepository:
    """Dependency to get invoice repository."""
    return SQLAlchemyInvoiceRepository(session)


def get_user_repository(session: DbSession) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(session)


def get_dashboard_repository(session: DbSession) -> SQLAlchemyDashboardRepository:
    return SQLAlchemyDashboardRepository(session)


def get_unit_of_work(session: DbSession) -> SQLAlchemyUnitOfWork:
    return SQLAlchemyUnitOfWork(session)


def get_ai_service() -> AiDescriptionService:
    return AiDescriptionService(get_settings())


def get_numbering_service() -> NumberingService:
    return NumberingService(get_settings().invoice_number_prefix)


def get_billing_service() -> BillingService:
    return BillingService(get_settings().invoice_payment_term_days)


def unwrap(result: UseCaseResult[T]) -> T:
    """Return the use case data or raise the HTTP error its code maps to."""
    if result.success:
        return result.data

    raise HTTPException(
        status_code=status_for_error_code(result.error_code),
        detail={"message": result.error, "error_code": result.error_code},
    )
