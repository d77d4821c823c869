"""
Time entry use cases for the application layer.
Logging work, editing it, flipping the billed flag and drafting descriptions.
"""

import logging
from typing import List, Optional

from starlette.concurrency import run_in_threadpool

from hourbook.application.use_cases.base_use_case import (
    CreateUseCase, UpdateUseCase, DeleteUseCase, GetByIdUseCase,
    ListUseCase, QueryUseCase, AuthorizedUseCase,
)
from hourbook.application.dto.base_dto import ListRequestDTO, GeneratedTextResponseDTO
from hourbook.application.dto.time_entry_dto import (
    CreateTimeEntryRequestDTO, UpdateTimeEntryRequestDTO, TimeEntryResponseDTO,
    ToggleBilledResponseDTO, GenerateDescriptionRequestDTO,
)
from hourbook.domain.models.base import (
    EntityNotFoundError, ValidationError, DeleteBlockedError, ExternalServiceError,
)
from hourbook.domain.models.project import Project
from hourbook.domain.models.time_entry import TimeEntry
from hourbook.domain.repositories.project_repository import ProjectRepository
from hourbook.domain.repositories.time_entry_repository import TimeEntryRepository
from hourbook.domain.repositories.unit_of_work import UnitOfWork
from hourbook.infrastructure.ai.description_service import AiDescriptionService, AiErrorCode


logger = logging.getLogger(__name__)

EMPTY_DESCRIPTION_PROMPT_MESSAGE = "Please provide a brief prompt so we can generate a description."


class TimeEntryUseCaseMixin:
    """Shared lookups for time entry use cases."""

    time_entry_repository: TimeEntryRepository
    project_repository: ProjectRepository

    def _get_owned_entry(self, entry_id: int) -> TimeEntry:
        entry = self.time_entry_repository.get_by_id(self.current_user_id, entry_id)
        if entry is None:
            raise EntityNotFoundError("TimeEntry", entry_id)
        return entry

    def _require_owned_project(self, project_id: int) -> Project:
        project = self.project_repository.get_by_id(self.current_user_id, project_id)
        if project is None:
            raise ValidationError("Please select a valid project", "project_id")
        return project


class CreateTimeEntryUseCase(TimeEntryUseCaseMixin, AuthorizedUseCase, CreateUseCase[CreateTimeEntryRequestDTO, TimeEntryResponseDTO]):
    """Use case for logging work against a project."""

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        project_repository: ProjectRepository,
        unit_of_work: UnitOfWork,
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.project_repository = project_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, request: CreateTimeEntryRequestDTO) -> TimeEntryResponseDTO:
        self._require_owned_project(request.project_id)

        entry = TimeEntry.create(
            owner_id=self.current_user_id,
            project_id=request.project_id,
            start_time=request.start_time,
            end_time=request.end_time,
            description=request.description,
            is_billed=request.is_billed,
        )

        saved_entry = self.time_entry_repository.save(entry)
        logger.info(
            f"Time entry {saved_entry.id} logged on project {request.project_id} "
            f"for user {self.current_user_id}"
        )

        return TimeEntryResponseDTO.from_domain(self._get_owned_entry(saved_entry.id))


class UpdateTimeEntryUseCase(TimeEntryUseCaseMixin, AuthorizedUseCase, UpdateUseCase[UpdateTimeEntryRequestDTO, TimeEntryResponseDTO]):

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        project_repository: ProjectRepository,
        unit_of_work: UnitOfWork,
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.project_repository = project_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, request: UpdateTimeEntryRequestDTO) -> TimeEntryResponseDTO:
        entry = self._get_owned_entry(request.id)
        self._require_owned_project(request.project_id)

        entry.update_info(
            project_id=request.project_id,
            start_time=request.start_time,
            end_time=request.end_time,
            description=request.description,
            is_billed=request.is_billed,
        )

        saved_entry = self.time_entry_repository.save(entry, expected_version=request.version)
        return TimeEntryResponseDTO.from_domain(self._get_owned_entry(saved_entry.id))


class GetTimeEntryUseCase(TimeEntryUseCaseMixin, AuthorizedUseCase, GetByIdUseCase[int, TimeEntryResponseDTO]):

    def __init__(self, time_entry_repository: TimeEntryRepository):
        super().__init__()
        self.time_entry_repository = time_entry_repository

    async def _execute_business_logic(self, entry_id: int) -> TimeEntryResponseDTO:
        return TimeEntryResponseDTO.from_domain(self._get_owned_entry(entry_id))


class ListTimeEntriesUseCase(AuthorizedUseCase, ListUseCase[ListRequestDTO, List[TimeEntryResponseDTO]]):
    """Use case for listing time entries, latest first."""

    def __init__(self, time_entry_repository: TimeEntryRepository):
        super().__init__()
        self.time_entry_repository = time_entry_repository

    async def _execute_business_logic(self, request: ListRequestDTO) -> List[TimeEntryResponseDTO]:
        entries = self.time_entry_repository.list(self.current_user_id, search=request.search)
        return [TimeEntryResponseDTO.from_domain(entry) for entry in entries]


class DeleteTimeEntryUseCase(TimeEntryUseCaseMixin, AuthorizedUseCase, DeleteUseCase[int, bool]):
    """Use case for deleting a time entry that no invoice references."""

    def __init__(self, time_entry_repository: TimeEntryRepository, unit_of_work: UnitOfWork):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, entry_id: int) -> bool:
        self._get_owned_entry(entry_id)

        if self.time_entry_repository.is_invoiced(self.current_user_id, entry_id):
            raise DeleteBlockedError("Cannot delete time entry because it is included in an invoice.")

        return self.time_entry_repository.delete(self.current_user_id, entry_id)


class ToggleBilledUseCase(TimeEntryUseCaseMixin, AuthorizedUseCase, UpdateUseCase[int, ToggleBilledResponseDTO]):

    def __init__(self, time_entry_repository: TimeEntryRepository, unit_of_work: UnitOfWork):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, entry_id: int) -> ToggleBilledResponseDTO:
        entry = self._get_owned_entry(entry_id)
        entry.toggle_billed()

        saved_entry = self.time_entry_repository.save(entry)
        return ToggleBilledResponseDTO(
            id=saved_entry.id,
            is_billed=saved_entry.is_billed,
            version=saved_entry.version,
        )


class GenerateDescriptionUseCase(TimeEntryUseCaseMixin, AuthorizedUseCase, QueryUseCase[GenerateDescriptionRequestDTO, GeneratedTextResponseDTO]):
    """
    Draft a time entry description with the AI assistant.

    The project label and the duration, when known, are passed along as
    context. Provider failures surface as ExternalServiceError with an
    ``AI_*`` code; nothing is persisted either way.
    """

    def __init__(self, project_repository: ProjectRepository, ai_service: AiDescriptionService):
        super().__init__()
        self.project_repository = project_repository
        self.ai_service = ai_service

    async def _execute_business_logic(self, request: GenerateDescriptionRequestDTO) -> GeneratedTextResponseDTO:
        if not request.prompt:
            raise ExternalServiceError(EMPTY_DESCRIPTION_PROMPT_MESSAGE, f"AI_{AiErrorCode.INVALID_PROMPT.value}")

        duration_hours = None
        if request.start_time and request.end_time:
            duration_hours = TimeEntry.hours_between(request.start_time, request.end_time)

        result = await run_in_threadpool(
            self.ai_service.generate,
            request.prompt,
            self._project_label(request.project_id),
            duration_hours,
            request.additional_context,
        )

        if not result.success:
            logger.info(f"Description generation failed for user {self.current_user_id}: {result.error_code}")
            raise ExternalServiceError(result.error, f"AI_{result.error_code.value}")

        return GeneratedTextResponseDTO(text=result.description)

    def _project_label(self, project_id: Optional[int]) -> Optional[str]:
        if project_id is None:
            return None
        project = self.project_repository.get_by_id(self.current_user_id, project_id)
        if project is None:
            return None
        if project.client_name:
            return f"{project.title} ({project.client_name})"
        return project.title
