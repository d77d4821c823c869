"""
Unit tests for client use cases.
"""

import pytest
from unittest.mock import Mock

from hourbook.application.use_cases.client_use_cases import (
    CreateClientUseCase, UpdateClientUseCase, GetClientUseCase,
    DeleteClientUseCase, DeactivateClientUseCase, CheckClientNameUseCase,
)
from hourbook.application.dto.client_dto import (
    CreateClientRequestDTO, UpdateClientRequestDTO, ClientNameCheckRequestDTO, DeleteOutcome,
)
from hourbook.domain.models.base import DuplicateEntityError, ConcurrencyConflictError
from hourbook.domain.models.client import Client


def saved_with_id(entity_id):
    def _save(entity, expected_version=None):
        entity.id = entity_id
        return entity
    return _save


class TestCreateClientUseCase:

    def setup_method(self):
        self.client_repository = Mock()
        self.unit_of_work = Mock()
        self.use_case = CreateClientUseCase(self.client_repository, self.unit_of_work).set_current_user("user-1")

    @pytest.mark.asyncio
    async def test_create_client_success(self):
        self.client_repository.save.side_effect = saved_with_id(7)

        result = await self.use_case.execute(CreateClientRequestDTO(name="  Acme  ", email="billing@acme.test"))

        assert result.success is True
        assert result.data.id == 7
        assert result.data.name == "Acme"
        assert result.data.owner_id == "user-1"
        assert result.data.is_active is True
        self.unit_of_work.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_duplicate_name_is_reported(self):
        self.client_repository.save.side_effect = DuplicateEntityError("Client", "name", "Acme")

        result = await self.use_case.execute(CreateClientRequestDTO(name="Acme"))

        assert result.success is False
        assert result.error_code == "DUPLICATE_ENTITY"
        self.unit_of_work.rollback.assert_called_once()

    @pytest.mark.asyncio
    async def test_invalid_email_is_rejected(self):
        result = await self.use_case.execute(CreateClientRequestDTO(name="Acme", email="not-an-email"))

        assert result.error_code == "VALIDATION_ERROR"
        self.client_repository.save.assert_not_called()


class TestUpdateClientUseCase:

    def setup_method(self):
        self.client_repository = Mock()
        self.unit_of_work = Mock()
        self.use_case = UpdateClientUseCase(self.client_repository, self.unit_of_work).set_current_user("user-1")
        self.client = Client(id=3, owner_id="user-1", name="Acme", version=2)
        self.client_repository.get_by_id.return_value = self.client
        self.client_repository.save.side_effect = saved_with_id(3)

    @pytest.mark.asyncio
    async def test_update_passes_expected_version(self):
        request = UpdateClientRequestDTO(id=3, name="Acme Corp", version=2)

        result = await self.use_case.execute(request)

        assert result.success is True
        assert result.data.name == "Acme Corp"
        self.client_repository.get_by_id.assert_called_once_with("user-1", 3)
        self.client_repository.save.assert_called_once_with(self.client, expected_version=2)

    @pytest.mark.asyncio
    async def test_stale_version_conflicts(self):
        self.client_repository.save.side_effect = ConcurrencyConflictError("Client", 3)

        result = await self.use_case.execute(UpdateClientRequestDTO(id=3, name="Acme Corp", version=1))

        assert result.error_code == "CONCURRENCY_CONFLICT"
        self.unit_of_work.rollback.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_of_foreign_client_is_not_found(self):
        self.client_repository.get_by_id.return_value = None

        result = await self.use_case.execute(UpdateClientRequestDTO(id=3, name="Acme Corp"))

        assert result.error_code == "ENTITY_NOT_FOUND"
        self.client_repository.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_owner_id_of_another_user_is_forbidden(self):
        result = await self.use_case.execute(UpdateClientRequestDTO(id=3, name="Acme", owner_id="user-2"))

        assert result.error_code == "FORBIDDEN"
        self.client_repository.get_by_id.assert_not_called()


class TestGetClientUseCase:

    @pytest.mark.asyncio
    async def test_non_positive_id_is_rejected(self):
        repository = Mock()
        use_case = GetClientUseCase(repository).set_current_user("user-1")

        result = await use_case.execute(0)

        assert result.error_code == "VALIDATION_ERROR"
        repository.get_by_id.assert_not_called()


class TestDeleteClientUseCase:

    def setup_method(self):
        self.client_repository = Mock()
        self.unit_of_work = Mock()
        self.use_case = DeleteClientUseCase(self.client_repository, self.unit_of_work).set_current_user("user-1")
        self.client = Client(id=5, owner_id="user-1", name="Acme")
        self.client_repository.get_by_id.return_value = self.client

    @pytest.mark.asyncio
    async def test_client_without_dependents_is_deleted(self):
        self.client_repository.has_dependents.return_value = False

        result = await self.use_case.execute(5)

        assert result.data.outcome == DeleteOutcome.HARD_DELETED
        self.client_repository.delete.assert_called_once_with("user-1", 5)
        self.unit_of_work.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_client_with_dependents_is_deactivated(self):
        self.client_repository.has_dependents.return_value = True

        result = await self.use_case.execute(5)

        assert result.data.outcome == DeleteOutcome.DEACTIVATED
        assert self.client.is_active is False
        self.client_repository.save.assert_called_once_with(self.client)
        self.client_repository.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_inactive_client_with_dependents_stays_inactive(self):
        self.client.is_active = False
        self.client_repository.has_dependents.return_value = True

        result = await self.use_case.execute(5)

        assert result.data.outcome == DeleteOutcome.DEACTIVATED
        self.client_repository.save.assert_not_called()


class TestDeactivateClientUseCase:

    @pytest.mark.asyncio
    async def test_deactivating_twice_is_a_rule_violation(self):
        repository = Mock()
        repository.get_by_id.return_value = Client(id=1, owner_id="user-1", name="Acme", is_active=False)
        use_case = DeactivateClientUseCase(repository, Mock()).set_current_user("user-1")

        result = await use_case.execute(1)

        assert result.error_code == "BUSINESS_RULE_VIOLATION"


class TestCheckClientNameUseCase:

    @pytest.mark.asyncio
    async def test_reports_availability(self):
        repository = Mock()
        repository.is_name_unique.return_value = False
        use_case = CheckClientNameUseCase(repository).set_current_user("user-1")

        result = await use_case.execute(ClientNameCheckRequestDTO(name="acme", exclude_id=4))

        assert result.data.available is False
        repository.is_name_unique.assert_called_once_with("user-1", "acme", exclude_id=4)
