"""
Time tracking router.
Handles time entry management and description drafting.
"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, status, Query

from hourbook.infrastructure.ai.description_service import AiDescriptionService
from hourbook.infrastructure.auth import get_current_owner
from hourbook.infrastructure.repositories import (
    SQLAlchemyProjectRepository, SQLAlchemyTimeEntryRepository, SQLAlchemyUnitOfWork,
)
from hourbook.infrastructure.web.dependencies import (
    get_ai_service, get_project_repository, get_time_entry_repository, get_unit_of_work, unwrap,
)
from hourbook.application.use_cases.time_entry_use_cases import (
    CreateTimeEntryUseCase,
    UpdateTimeEntryUseCase,
    GetTimeEntryUseCase,
    ListTimeEntriesUseCase,
    DeleteTimeEntryUseCase,
    ToggleBilledUseCase,
    GenerateDescriptionUseCase,
)
from hourbook.application.dto.base_dto import ListRequestDTO, GeneratedTextResponseDTO
from hourbook.application.dto.time_entry_dto import (
    CreateTimeEntryRequestDTO,
    UpdateTimeEntryRequestDTO,
    TimeEntryResponseDTO,
    ToggleBilledResponseDTO,
    GenerateDescriptionRequestDTO,
)


router = APIRouter()

OwnerId = Annotated[str, Depends(get_current_owner)]
TimeEntryRepo = Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)]
ProjectRepo = Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
UnitOfWorkDep = Annotated[SQLAlchemyUnitOfWork, Depends(get_unit_of_work)]


@router.get("", response_model=List[TimeEntryResponseDTO])
async def list_time_entries(
    user_id: OwnerId,
    repository: TimeEntryRepo,
    search: Optional[str] = Query(None, max_length=200, description="Search description, project title and client name"),
):
    """List time entries, latest start first."""
    use_case = ListTimeEntriesUseCase(repository).set_current_user(user_id)
    return unwrap(await use_case.execute(ListRequestDTO(search=search)))


@router.post("/generate-description", response_model=GeneratedTextResponseDTO)
async def generate_description(
    request: GenerateDescriptionRequestDTO,
    user_id: OwnerId,
    project_repository: ProjectRepo,
    ai_service: Annotated[AiDescriptionService, Depends(get_ai_service)],
):
    """
    Draft a billable description with the AI assistant.

    - **prompt**: Short instruction (required)
    - **project_id**, **start_time**, **end_time**, **additional_context**: Optional context
    """
    use_case = GenerateDescriptionUseCase(project_repository, ai_service).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.get("/{entry_id}", response_model=TimeEntryResponseDTO)
async def get_time_entry(entry_id: int, user_id: OwnerId, repository: TimeEntryRepo):
    """Get a time entry by ID."""
    use_case = GetTimeEntryUseCase(repository).set_current_user(user_id)
    return unwrap(await use_case.execute(entry_id))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TimeEntryResponseDTO)
async def create_time_entry(
    request: CreateTimeEntryRequestDTO,
    user_id: OwnerId,
    repository: TimeEntryRepo,
    project_repository: ProjectRepo,
    unit_of_work: UnitOfWorkDep,
):
    """
    Log a time entry.

    - **project_id**: One of the current user's projects (required)
    - **start_time**, **end_time**: End must be after start (required)
    - **description**: Work performed (required)
    """
    use_case = CreateTimeEntryUseCase(repository, project_repository, unit_of_work).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.put("/{entry_id}", response_model=TimeEntryResponseDTO)
async def update_time_entry(
    entry_id: int,
    request: UpdateTimeEntryRequestDTO,
    user_id: OwnerId,
    repository: TimeEntryRepo,
    project_repository: ProjectRepo,
    unit_of_work: UnitOfWorkDep,
):
    """Update a time entry."""
    request.id = entry_id
    use_case = UpdateTimeEntryUseCase(repository, project_repository, unit_of_work).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_time_entry(
    entry_id: int,
    user_id: OwnerId,
    repository: TimeEntryRepo,
    unit_of_work: UnitOfWorkDep,
):
    """Delete a time entry. Entries included in an invoice are kept."""
    use_case = DeleteTimeEntryUseCase(repository, unit_of_work).set_current_user(user_id)
    unwrap(await use_case.execute(entry_id))


@router.post("/{entry_id}/toggle-billed", response_model=ToggleBilledResponseDTO)
async def toggle_billed(
    entry_id: int,
    user_id: OwnerId,
    repository: TimeEntryRepo,
    unit_of_work: UnitOfWorkDep,
):
    """Flip the billed flag of a time entry."""
    use_case = ToggleBilledUseCase(repository, unit_of_work).set_current_user(user_id)
    return unwrap(await use_case.execute(entry_id))
