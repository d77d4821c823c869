"""
Project management router.
"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, status, Query

from hourbook.infrastructure.auth import get_current_owner
from hourbook.infrastructure.repositories import (
    SQLAlchemyClientRepository, SQLAlchemyProjectRepository, SQLAlchemyUnitOfWork,
)
from hourbook.infrastructure.web.dependencies import (
    get_client_repository, get_project_repository, get_unit_of_work, unwrap,
)
from hourbook.application.use_cases.project_use_cases import (
    CreateProjectUseCase,
    UpdateProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    DeleteProjectUseCase,
)
from hourbook.application.dto.base_dto import ListRequestDTO
from hourbook.application.dto.project_dto import (
    CreateProjectRequestDTO,
    UpdateProjectRequestDTO,
    ProjectResponseDTO,
)


router = APIRouter()

OwnerId = Annotated[str, Depends(get_current_owner)]
ProjectRepo = Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
ClientRepo = Annotated[SQLAlchemyClientRepository, Depends(get_client_repository)]
UnitOfWorkDep = Annotated[SQLAlchemyUnitOfWork, Depends(get_unit_of_work)]


@router.get("", response_model=List[ProjectResponseDTO])
async def list_projects(
    user_id: OwnerId,
    repository: ProjectRepo,
    search: Optional[str] = Query(None, max_length=200, description="Search title, description and client name"),
):
    """List projects ordered by title."""
    use_case = ListProjectsUseCase(repository).set_current_user(user_id)
    return unwrap(await use_case.execute(ListRequestDTO(search=search)))


@router.get("/{project_id}", response_model=ProjectResponseDTO)
async def get_project(project_id: int, user_id: OwnerId, repository: ProjectRepo):
    """Get a project by ID."""
    use_case = GetProjectUseCase(repository).set_current_user(user_id)
    return unwrap(await use_case.execute(project_id))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponseDTO)
async def create_project(
    request: CreateProjectRequestDTO,
    user_id: OwnerId,
    repository: ProjectRepo,
    client_repository: ClientRepo,
    unit_of_work: UnitOfWorkDep,
):
    """
    Create a new project.

    - **client_id**: An active client of the current user (required)
    - **title**: Project title, unique per user (required)
    - **hourly_rate**: Rate billed per hour (required, >= 0)
    - **status**: active, completed or invoiced
    """
    use_case = CreateProjectUseCase(repository, client_repository, unit_of_work).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.put("/{project_id}", response_model=ProjectResponseDTO)
async def update_project(
    project_id: int,
    request: UpdateProjectRequestDTO,
    user_id: OwnerId,
    repository: ProjectRepo,
    client_repository: ClientRepo,
    unit_of_work: UnitOfWorkDep,
):
    """Update a project."""
    request.id = project_id
    use_case = UpdateProjectUseCase(repository, client_repository, unit_of_work).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int,
    user_id: OwnerId,
    repository: ProjectRepo,
    unit_of_work: UnitOfWorkDep,
):
    """Delete a project. Refused with 409 while time entries reference it."""
    use_case = DeleteProjectUseCase(repository, unit_of_work).set_current_user(user_id)
    unwrap(await use_case.execute(project_id))
