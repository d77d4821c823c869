"""
Unit tests for use case result handling and the base use case flow.
"""

import pytest
from unittest.mock import Mock

from hourbook.application.use_cases.base_use_case import (
    UseCaseResult, CreateUseCase, AuthorizedUseCase,
)
from hourbook.domain.models.base import (
    ValidationError, BusinessRuleViolation, EntityNotFoundError, DeleteBlockedError,
)


class TestUseCaseResult:
    """Test cases for UseCaseResult."""

    def test_success_result(self):
        """Test creating successful result."""
        result = UseCaseResult.success_result({"id": 1, "name": "test"})

        assert result.success is True
        assert result.data == {"id": 1, "name": "test"}
        assert result.error is None
        assert result.error_code is None

    def test_error_result(self):
        """Test creating error result."""
        result = UseCaseResult.error_result("Something went wrong", "TEST_ERROR")

        assert result.success is False
        assert result.data is None
        assert result.error == "Something went wrong"
        assert result.error_code == "TEST_ERROR"

    def test_from_domain_exceptions(self):
        assert UseCaseResult.from_exception(ValidationError("bad")).error_code == "VALIDATION_ERROR"
        assert UseCaseResult.from_exception(BusinessRuleViolation("no")).error_code == "BUSINESS_RULE_VIOLATION"
        assert UseCaseResult.from_exception(EntityNotFoundError("Client", 3)).error_code == "ENTITY_NOT_FOUND"
        assert UseCaseResult.from_exception(DeleteBlockedError("kept")).error_code == "DELETE_BLOCKED"

    def test_unexpected_exception_hides_message(self):
        result = UseCaseResult.from_exception(RuntimeError("password=hunter2"))

        assert result.error_code == "INTERNAL_ERROR"
        assert "hunter2" not in result.error


class RecordingCreateUseCase(AuthorizedUseCase, CreateUseCase[Mock, str]):
    """Minimal command use case for exercising the base flow."""

    def __init__(self, unit_of_work, outcome):
        super().__init__()
        self.unit_of_work = unit_of_work
        self.outcome = outcome

    async def _execute_command_logic(self, request):
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


class TestCommandUseCaseFlow:

    def setup_method(self):
        self.unit_of_work = Mock()

    @pytest.mark.asyncio
    async def test_commits_on_success(self):
        use_case = RecordingCreateUseCase(self.unit_of_work, "done").set_current_user("user-1")

        result = await use_case.execute(Mock(owner_id=None))

        assert result.success is True
        assert result.data == "done"
        self.unit_of_work.commit.assert_called_once()
        self.unit_of_work.rollback.assert_not_called()

    @pytest.mark.asyncio
    async def test_rolls_back_on_failure(self):
        use_case = RecordingCreateUseCase(self.unit_of_work, ValidationError("nope")).set_current_user("user-1")

        result = await use_case.execute(Mock(owner_id=None))

        assert result.success is False
        assert result.error == "nope"
        self.unit_of_work.rollback.assert_called_once()
        self.unit_of_work.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_requires_authenticated_user(self):
        use_case = RecordingCreateUseCase(self.unit_of_work, "done")

        result = await use_case.execute(Mock(owner_id=None))

        assert result.error_code == "VALIDATION_ERROR"
        self.unit_of_work.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_foreign_owner_in_payload_is_forbidden(self):
        use_case = RecordingCreateUseCase(self.unit_of_work, "done").set_current_user("user-1")

        result = await use_case.execute(Mock(owner_id="user-2"))

        assert result.error_code == "FORBIDDEN"
        self.unit_of_work.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_unexpected_error_is_logged_and_wrapped(self, caplog):
        use_case = RecordingCreateUseCase(self.unit_of_work, RuntimeError("boom")).set_current_user("user-1")

        result = await use_case.execute(Mock(owner_id=None, id=42))

        assert result.error_code == "INTERNAL_ERROR"
        assert "user=user-1" in caplog.text
        assert "entity=42" in caplog.text
