"""
Unit tests for time entry use cases.
"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import Mock

from hourbook.application.use_cases.time_entry_use_cases import (
    CreateTimeEntryUseCase, DeleteTimeEntryUseCase, ToggleBilledUseCase,
    GenerateDescriptionUseCase, EMPTY_DESCRIPTION_PROMPT_MESSAGE,
)
from hourbook.application.use_cases.project_use_cases import DeleteProjectUseCase
from hourbook.application.dto.time_entry_dto import (
    CreateTimeEntryRequestDTO, GenerateDescriptionRequestDTO,
)
from hourbook.domain.models.project import Project
from hourbook.domain.models.time_entry import TimeEntry
from hourbook.infrastructure.ai.description_service import AiDescriptionResult, AiErrorCode


def make_entry(**overrides):
    values = dict(
        id=4,
        owner_id="user-1",
        project_id=2,
        start_time=datetime(2026, 1, 5, 9, 0),
        end_time=datetime(2026, 1, 5, 11, 0),
        description="Design review",
        hourly_rate=Decimal("50"),
    )
    values.update(overrides)
    return TimeEntry(**values)


class TestCreateTimeEntryUseCase:

    def setup_method(self):
        self.time_entry_repository = Mock()
        self.project_repository = Mock()
        self.unit_of_work = Mock()
        self.use_case = CreateTimeEntryUseCase(
            self.time_entry_repository, self.project_repository, self.unit_of_work
        ).set_current_user("user-1")
        self.request = CreateTimeEntryRequestDTO(
            project_id=2,
            start_time=datetime(2026, 1, 5, 9, 0),
            end_time=datetime(2026, 1, 5, 11, 0),
            description="Design review",
        )

    @pytest.mark.asyncio
    async def test_logs_time_with_derived_amount(self):
        self.project_repository.get_by_id.return_value = Project(id=2, owner_id="user-1", client_id=1, title="Website")
        self.time_entry_repository.save.side_effect = lambda entry: make_entry()
        self.time_entry_repository.get_by_id.return_value = make_entry()

        result = await self.use_case.execute(self.request)

        assert result.success is True
        assert result.data.duration_hours == Decimal("2.00")
        assert result.data.amount == Decimal("100.00")
        self.unit_of_work.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_foreign_project_is_rejected(self):
        self.project_repository.get_by_id.return_value = None

        result = await self.use_case.execute(self.request)

        assert result.error_code == "VALIDATION_ERROR"
        assert result.error == "Please select a valid project"
        self.time_entry_repository.save.assert_not_called()


class TestDeleteTimeEntryUseCase:

    def setup_method(self):
        self.time_entry_repository = Mock()
        self.time_entry_repository.get_by_id.return_value = make_entry()
        self.use_case = DeleteTimeEntryUseCase(self.time_entry_repository, Mock()).set_current_user("user-1")

    @pytest.mark.asyncio
    async def test_invoiced_entry_is_kept(self):
        self.time_entry_repository.is_invoiced.return_value = True

        result = await self.use_case.execute(4)

        assert result.error_code == "DELETE_BLOCKED"
        self.time_entry_repository.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_free_entry_is_deleted(self):
        self.time_entry_repository.is_invoiced.return_value = False
        self.time_entry_repository.delete.return_value = True

        result = await self.use_case.execute(4)

        assert result.data is True
        self.time_entry_repository.delete.assert_called_once_with("user-1", 4)


class TestDeleteProjectUseCase:

    @pytest.mark.asyncio
    async def test_project_with_time_is_kept(self):
        repository = Mock()
        repository.get_by_id.return_value = Project(id=2, owner_id="user-1", client_id=1, title="Website")
        repository.has_time_entries.return_value = True
        use_case = DeleteProjectUseCase(repository, Mock()).set_current_user("user-1")

        result = await use_case.execute(2)

        assert result.error_code == "DELETE_BLOCKED"
        repository.delete.assert_not_called()


class TestToggleBilledUseCase:

    @pytest.mark.asyncio
    async def test_flips_flag(self):
        entry = make_entry(is_billed=False)
        repository = Mock()
        repository.get_by_id.return_value = entry
        repository.save.side_effect = lambda saved: saved
        use_case = ToggleBilledUseCase(repository, Mock()).set_current_user("user-1")

        result = await use_case.execute(4)

        assert result.data.is_billed is True
        assert entry.is_billed is True


class TestGenerateDescriptionUseCase:

    def setup_method(self):
        self.project_repository = Mock()
        self.project_repository.get_by_id.return_value = Project(
            id=2, owner_id="user-1", client_id=1, title="Website", client_name="Acme"
        )
        self.ai_service = Mock()
        self.ai_service.generate.return_value = AiDescriptionResult.ok("Reviewed homepage designs.")
        self.use_case = GenerateDescriptionUseCase(self.project_repository, self.ai_service).set_current_user("user-1")

    @pytest.mark.asyncio
    async def test_project_label_and_duration_are_passed(self):
        request = GenerateDescriptionRequestDTO(
            prompt="design review",
            project_id=2,
            start_time=datetime(2026, 1, 5, 9, 0),
            end_time=datetime(2026, 1, 5, 10, 30),
        )

        result = await self.use_case.execute(request)

        assert result.data.text == "Reviewed homepage designs."
        self.ai_service.generate.assert_called_once_with(
            "design review", "Website (Acme)", Decimal("1.5"), None
        )

    @pytest.mark.asyncio
    async def test_unknown_project_only_drops_label(self):
        self.project_repository.get_by_id.return_value = None

        result = await self.use_case.execute(GenerateDescriptionRequestDTO(prompt="standup", project_id=99))

        assert result.success is True
        self.ai_service.generate.assert_called_once_with("standup", None, None, None)

    @pytest.mark.asyncio
    async def test_blank_prompt_is_rejected(self):
        result = await self.use_case.execute(GenerateDescriptionRequestDTO(prompt=None))

        assert result.error_code == "AI_INVALID_PROMPT"
        assert result.error == EMPTY_DESCRIPTION_PROMPT_MESSAGE
        self.ai_service.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_disabled_assistant_is_reported(self):
        self.ai_service.generate.return_value = AiDescriptionResult.failure(AiErrorCode.DISABLED)

        result = await self.use_case.execute(GenerateDescriptionRequestDTO(prompt="standup"))

        assert result.error_code == "AI_DISABLED"
