"""
Project use cases for the application layer.
"""

import logging
from typing import List

from hourbook.application.use_cases.base_use_case import (
    CreateUseCase, UpdateUseCase, DeleteUseCase, GetByIdUseCase,
    ListUseCase, AuthorizedUseCase,
)
from hourbook.application.dto.base_dto import ListRequestDTO
from hourbook.application.dto.project_dto import (
    CreateProjectRequestDTO, UpdateProjectRequestDTO, ProjectResponseDTO,
)
from hourbook.domain.models.base import (
    EntityNotFoundError, ValidationError, DeleteBlockedError,
)
from hourbook.domain.models.client import Client
from hourbook.domain.models.project import Project
from hourbook.domain.repositories.client_repository import ClientRepository
from hourbook.domain.repositories.project_repository import ProjectRepository
from hourbook.domain.repositories.unit_of_work import UnitOfWork


logger = logging.getLogger(__name__)


class ProjectUseCaseMixin:
    """Shared lookups for project use cases."""

    project_repository: ProjectRepository
    client_repository: ClientRepository

    def _get_owned_project(self, project_id: int) -> Project:
        project = self.project_repository.get_by_id(self.current_user_id, project_id)
        if project is None:
            raise EntityNotFoundError("Project", project_id)
        return project

    def _require_active_client(self, client_id: int) -> Client:
        client = self.client_repository.get_by_id(self.current_user_id, client_id)
        if client is None:
            raise ValidationError("Please select a valid client", "client_id")
        client.ensure_can_be_billed()
        return client


class CreateProjectUseCase(ProjectUseCaseMixin, AuthorizedUseCase, CreateUseCase[CreateProjectRequestDTO, ProjectResponseDTO]):
    """Use case for creating a project under an active client."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        client_repository: ClientRepository,
        unit_of_work: UnitOfWork,
    ):
        super().__init__()
        self.project_repository = project_repository
        self.client_repository = client_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, request: CreateProjectRequestDTO) -> ProjectResponseDTO:
        self._require_active_client(request.client_id)

        project = Project.create(
            owner_id=self.current_user_id,
            client_id=request.client_id,
            title=request.title,
            description=request.description,
            hourly_rate=request.hourly_rate,
            status=request.status,
            start_date=request.start_date,
            end_date=request.end_date,
        )

        saved_project = self.project_repository.save(project)
        logger.info(f"Project {saved_project.id} created for user {self.current_user_id}")

        return ProjectResponseDTO.from_domain(self._get_owned_project(saved_project.id))


class UpdateProjectUseCase(ProjectUseCaseMixin, AuthorizedUseCase, UpdateUseCase[UpdateProjectRequestDTO, ProjectResponseDTO]):
    """Use case for editing a project."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        client_repository: ClientRepository,
        unit_of_work: UnitOfWork,
    ):
        super().__init__()
        self.project_repository = project_repository
        self.client_repository = client_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, request: UpdateProjectRequestDTO) -> ProjectResponseDTO:
        project = self._get_owned_project(request.id)
        self._require_active_client(request.client_id)

        project.update_info(
            client_id=request.client_id,
            title=request.title,
            description=request.description,
            hourly_rate=request.hourly_rate,
            status=request.status,
            start_date=request.start_date,
            end_date=request.end_date,
        )

        saved_project = self.project_repository.save(project, expected_version=request.version)
        return ProjectResponseDTO.from_domain(self._get_owned_project(saved_project.id))


class GetProjectUseCase(ProjectUseCaseMixin, AuthorizedUseCase, GetByIdUseCase[int, ProjectResponseDTO]):

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository

    async def _execute_business_logic(self, project_id: int) -> ProjectResponseDTO:
        return ProjectResponseDTO.from_domain(self._get_owned_project(project_id))


class ListProjectsUseCase(AuthorizedUseCase, ListUseCase[ListRequestDTO, List[ProjectResponseDTO]]):

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository

    async def _execute_business_logic(self, request: ListRequestDTO) -> List[ProjectResponseDTO]:
        projects = self.project_repository.list(self.current_user_id, search=request.search)
        return [ProjectResponseDTO.from_domain(project) for project in projects]


class DeleteProjectUseCase(ProjectUseCaseMixin, AuthorizedUseCase, DeleteUseCase[int, bool]):
    """Use case for deleting a project. Projects with logged time are kept."""

    def __init__(self, project_repository: ProjectRepository, unit_of_work: UnitOfWork):
        super().__init__()
        self.project_repository = project_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, project_id: int) -> bool:
        self._get_owned_project(project_id)

        if self.project_repository.has_time_entries(self.current_user_id, project_id):
            raise DeleteBlockedError(
                "Cannot delete project because it has associated time entries."
            )

        return self.project_repository.delete(self.current_user_id, project_id)
