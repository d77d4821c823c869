"""
Client use cases for the application layer.
Implements business logic for client operations.
"""

import logging
from typing import List

from hourbook.application.use_cases.base_use_case import (
    CreateUseCase, UpdateUseCase, DeleteUseCase, GetByIdUseCase,
    ListUseCase, QueryUseCase, AuthorizedUseCase,
)
from hourbook.application.dto.client_dto import (
    CreateClientRequestDTO, UpdateClientRequestDTO, ListClientsRequestDTO,
    ClientNameCheckRequestDTO, ClientResponseDTO, ClientDeleteResponseDTO,
    ClientNameAvailabilityResponseDTO, DeleteOutcome,
)
from hourbook.domain.models.base import EntityNotFoundError
from hourbook.domain.models.client import Client
from hourbook.domain.repositories.client_repository import ClientRepository
from hourbook.domain.repositories.unit_of_work import UnitOfWork


logger = logging.getLogger(__name__)


class ClientUseCaseMixin:
    """Shared lookup for client use cases."""

    client_repository: ClientRepository

    def _get_owned_client(self, client_id: int) -> Client:
        client = self.client_repository.get_by_id(self.current_user_id, client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client


class CreateClientUseCase(AuthorizedUseCase, CreateUseCase[CreateClientRequestDTO, ClientResponseDTO]):
    """Use case for creating a new client."""

    def __init__(self, client_repository: ClientRepository, unit_of_work: UnitOfWork):
        super().__init__()
        self.client_repository = client_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, request: CreateClientRequestDTO) -> ClientResponseDTO:
        client = Client.create(
            owner_id=self.current_user_id,
            name=request.name,
            email=request.email,
            phone=request.phone,
            address=request.address,
            notes=request.notes,
        )

        saved_client = self.client_repository.save(client)
        logger.info(f"Client {saved_client.id} created for user {self.current_user_id}")

        return ClientResponseDTO.from_domain(saved_client)


class UpdateClientUseCase(ClientUseCaseMixin, AuthorizedUseCase, UpdateUseCase[UpdateClientRequestDTO, ClientResponseDTO]):
    """Use case for updating client information."""

    def __init__(self, client_repository: ClientRepository, unit_of_work: UnitOfWork):
        super().__init__()
        self.client_repository = client_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, request: UpdateClientRequestDTO) -> ClientResponseDTO:
        client = self._get_owned_client(request.id)

        client.update_info(
            name=request.name,
            email=request.email,
            phone=request.phone,
            address=request.address,
            notes=request.notes,
            is_active=request.is_active,
        )

        saved_client = self.client_repository.save(client, expected_version=request.version)
        return ClientResponseDTO.from_domain(saved_client)


class GetClientUseCase(ClientUseCaseMixin, AuthorizedUseCase, GetByIdUseCase[int, ClientResponseDTO]):
    """Use case for getting one client."""

    def __init__(self, client_repository: ClientRepository):
        super().__init__()
        self.client_repository = client_repository

    async def _execute_business_logic(self, client_id: int) -> ClientResponseDTO:
        return ClientResponseDTO.from_domain(self._get_owned_client(client_id))


class ListClientsUseCase(AuthorizedUseCase, ListUseCase[ListClientsRequestDTO, List[ClientResponseDTO]]):
    """Use case for listing clients, active ones by default."""

    def __init__(self, client_repository: ClientRepository):
        super().__init__()
        self.client_repository = client_repository

    async def _execute_business_logic(self, request: ListClientsRequestDTO) -> List[ClientResponseDTO]:
        clients = self.client_repository.list(
            self.current_user_id,
            search=request.search,
            include_inactive=request.include_inactive,
        )
        return [ClientResponseDTO.from_domain(client) for client in clients]


class DeleteClientUseCase(ClientUseCaseMixin, AuthorizedUseCase, DeleteUseCase[int, ClientDeleteResponseDTO]):
    """
    Use case for deleting a client.
    Clients still referenced by projects or invoices are deactivated instead.
    """

    def __init__(self, client_repository: ClientRepository, unit_of_work: UnitOfWork):
        super().__init__()
        self.client_repository = client_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, client_id: int) -> ClientDeleteResponseDTO:
        client = self._get_owned_client(client_id)

        if self.client_repository.has_dependents(self.current_user_id, client_id):
            if client.is_active:
                client.deactivate()
                self.client_repository.save(client)
            logger.info(f"Client {client_id} has dependents; deactivated instead of deleted")
            return ClientDeleteResponseDTO(
                client_id=client_id,
                outcome=DeleteOutcome.DEACTIVATED,
                message="Client has projects or invoices and was deactivated instead of deleted.",
            )

        self.client_repository.delete(self.current_user_id, client_id)
        return ClientDeleteResponseDTO(
            client_id=client_id,
            outcome=DeleteOutcome.HARD_DELETED,
            message="Client deleted.",
        )


class DeactivateClientUseCase(ClientUseCaseMixin, AuthorizedUseCase, UpdateUseCase[int, ClientResponseDTO]):
    """Use case for soft-deleting a client."""

    def __init__(self, client_repository: ClientRepository, unit_of_work: UnitOfWork):
        super().__init__()
        self.client_repository = client_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, client_id: int) -> ClientResponseDTO:
        client = self._get_owned_client(client_id)
        client.deactivate()
        return ClientResponseDTO.from_domain(self.client_repository.save(client))


class ReactivateClientUseCase(ClientUseCaseMixin, AuthorizedUseCase, UpdateUseCase[int, ClientResponseDTO]):
    """Use case for bringing a deactivated client back."""

    def __init__(self, client_repository: ClientRepository, unit_of_work: UnitOfWork):
        super().__init__()
        self.client_repository = client_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, client_id: int) -> ClientResponseDTO:
        client = self._get_owned_client(client_id)
        client.reactivate()
        return ClientResponseDTO.from_domain(self.client_repository.save(client))


class CheckClientNameUseCase(AuthorizedUseCase, QueryUseCase[ClientNameCheckRequestDTO, ClientNameAvailabilityResponseDTO]):
    """Use case for the live name uniqueness check."""

    def __init__(self, client_repository: ClientRepository):
        super().__init__()
        self.client_repository = client_repository

    async def _execute_business_logic(self, request: ClientNameCheckRequestDTO) -> ClientNameAvailabilityResponseDTO:
        available = self.client_repository.is_name_unique(
            self.current_user_id, request.name, exclude_id=request.exclude_id
        )
        return ClientNameAvailabilityResponseDTO(name=request.name, available=available)
